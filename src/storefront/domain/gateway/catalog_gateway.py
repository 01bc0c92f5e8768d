"""Port for the external product catalog.

Defined in the domain layer so application handlers depend on this
interface only.  The HTTP implementation lives in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogGateway(ABC):

    @abstractmethod
    def fetch_all(self, limit: int = 100, skip: int = 0) -> list[Product]:
        """Return one page of the whole catalog."""

    @abstractmethod
    def fetch_by_category(
        self, category: str, limit: int = 20, skip: int = 0
    ) -> list[Product]:
        """Return one page of a category."""

    @abstractmethod
    def fetch_by_id(self, product_id: str) -> Product:
        """Return a single product.

        Raises EntityNotFoundError for unknown ids and
        UpstreamUnavailableError when the catalog cannot be reached.
        """

    @abstractmethod
    def search(self, query: str, limit: int = 20, skip: int = 0) -> list[Product]:
        """Return one page of products matching a free-text query."""

    @abstractmethod
    def fetch_categories(self) -> list[str]:
        """Return every category slug."""
