"""Application service: Browse Products use case (query).

Loads the first hundred catalog products (one cached call) and filters
and paginates them locally.  A gender filter keeps unisex products too.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.dto import Pagination, ProductPageDTO, validate_paging
from storefront.domain.exceptions import ValidationError
from storefront.domain.gateway.catalog_gateway import CatalogGateway
from storefront.domain.model.product import GENDERS, Product
from storefront.domain.model.value_objects import Money

BROWSE_WINDOW = 100


@dataclass(frozen=True)
class ProductFilter:
    category: str | None = None
    brand: str | None = None
    gender: str | None = None
    min_price: str | None = None
    max_price: str | None = None


class BrowseProductsHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(
        self,
        filters: ProductFilter | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ProductPageDTO:
        validate_paging(page, limit)
        filters = filters or ProductFilter()
        matches = self._apply(filters, self._catalog.fetch_all(BROWSE_WINDOW, 0))

        start = (page - 1) * limit
        return ProductPageDTO(
            products=matches[start:start + limit],
            pagination=Pagination.of(page, limit, len(matches)),
        )

    @staticmethod
    def _apply(filters: ProductFilter, products: list[Product]) -> list[Product]:
        if filters.gender is not None and filters.gender not in GENDERS:
            raise ValidationError(
                "Invalid gender parameter. Must be men, women, or unisex"
            )
        min_price = Money.of(filters.min_price) if filters.min_price else None
        max_price = Money.of(filters.max_price) if filters.max_price else None

        result = []
        for p in products:
            if filters.category and p.category != filters.category:
                continue
            if filters.brand and p.brand.lower() != filters.brand.lower():
                continue
            if filters.gender and p.gender not in (filters.gender, "unisex"):
                continue
            if min_price is not None and p.price < min_price:
                continue
            if max_price is not None and p.price > max_price:
                continue
            result.append(p)
        return result
