"""Application service: Show Product use case (query).

A direct lookup: catalog errors propagate to the caller.
"""

from __future__ import annotations

from storefront.domain.gateway.catalog_gateway import CatalogGateway
from storefront.domain.model.product import Product


class ShowProductHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, product_id: str) -> Product:
        return self._catalog.fetch_by_id(product_id)
