"""Application service: Search Products and Category Products (queries).

Both are paged upstream; ``page`` maps to ``skip = (page - 1) * limit``.
"""

from __future__ import annotations

from storefront.application.dto import Pagination, ProductPageDTO, validate_paging
from storefront.domain.exceptions import ValidationError
from storefront.domain.gateway.catalog_gateway import CatalogGateway


class SearchProductsHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, query: str, page: int = 1, limit: int = 10) -> ProductPageDTO:
        validate_paging(page, limit)
        if not query or not query.strip():
            raise ValidationError("Search query is required")
        products = self._catalog.search(query.strip(), limit, (page - 1) * limit)
        return ProductPageDTO(products, Pagination.of(page, limit, len(products)))


class CategoryProductsHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, category: str, page: int = 1, limit: int = 10) -> ProductPageDTO:
        validate_paging(page, limit)
        products = self._catalog.fetch_by_category(category, limit, (page - 1) * limit)
        return ProductPageDTO(products, Pagination.of(page, limit, len(products)))
