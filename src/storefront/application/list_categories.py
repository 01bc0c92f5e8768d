"""Application service: List Categories use case (query)."""

from __future__ import annotations

from storefront.domain.gateway.catalog_gateway import CatalogGateway


class ListCategoriesHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self) -> list[str]:
        return self._catalog.fetch_categories()
