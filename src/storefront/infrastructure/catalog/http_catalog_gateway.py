"""HTTP implementation of CatalogGateway with a read-through TTL cache.

Every public call derives a cache key from its arguments.  On a hit the
cached result is returned without touching the network; on a miss one GET
is issued, the body is mapped to Products and the mapped result cached.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from storefront.domain.exceptions import (
    EntityNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from storefront.domain.gateway.catalog_gateway import CatalogGateway
from storefront.domain.model.product import Product
from storefront.infrastructure.cache.ttl_cache import TTLCache
from storefront.infrastructure.catalog.product_mapper import ProductMapper

logger = structlog.get_logger(__name__)

CATEGORIES_KEY = "categories"


def all_products_key(limit: int, skip: int) -> str:
    return f"all_products_{limit}_{skip}"


def category_key(category: str, limit: int, skip: int) -> str:
    return f"category_{category}_{limit}_{skip}"


def product_key(product_id: str) -> str:
    return f"product_{product_id}"


def search_key(query: str, limit: int, skip: int) -> str:
    return f"search_{query}_{limit}_{skip}"


class HttpCatalogGateway(CatalogGateway):

    def __init__(
        self,
        client: httpx.Client,
        cache: TTLCache,
        mapper: ProductMapper | None = None,
    ) -> None:
        self._client = client
        self._cache = cache
        self._mapper = mapper or ProductMapper()

    # --- CatalogGateway interface ---------------------------------------------

    def fetch_all(self, limit: int = 100, skip: int = 0) -> list[Product]:
        key = all_products_key(limit, skip)
        cached = self._cached(key)
        if cached is not None:
            return list(cached)

        body = self._get_json("/", params={"limit": limit, "skip": skip})
        products = self._map_page(body)
        self._cache.set(key, products)
        return list(products)

    def fetch_by_category(
        self, category: str, limit: int = 20, skip: int = 0
    ) -> list[Product]:
        if not category or not category.strip():
            raise ValidationError("Category is required")
        key = category_key(category, limit, skip)
        cached = self._cached(key)
        if cached is not None:
            return list(cached)

        body = self._get_json(
            f"/category/{quote(category, safe='')}",
            params={"limit": limit, "skip": skip},
        )
        products = self._map_page(body)
        self._cache.set(key, products)
        return list(products)

    def fetch_by_id(self, product_id: str) -> Product:
        if not str(product_id).strip():
            raise ValidationError("Product ID is required")
        key = product_key(product_id)
        cached = self._cached(key)
        if cached is not None:
            return cached

        body = self._get_json(
            f"/{quote(str(product_id), safe='')}",
            not_found_message="Product not found",
        )
        if not isinstance(body, dict):
            raise UpstreamUnavailableError("Catalog returned a malformed product")
        product = self._map_one(body)
        self._cache.set(key, product)
        return product

    def search(self, query: str, limit: int = 20, skip: int = 0) -> list[Product]:
        key = search_key(query, limit, skip)
        cached = self._cached(key)
        if cached is not None:
            return list(cached)

        body = self._get_json(
            "/search", params={"q": query, "limit": limit, "skip": skip}
        )
        products = self._map_page(body)
        self._cache.set(key, products)
        return list(products)

    def fetch_categories(self) -> list[str]:
        cached = self._cached(CATEGORIES_KEY)
        if cached is not None:
            return list(cached)

        body = self._get_json("/categories")
        if not isinstance(body, list):
            raise UpstreamUnavailableError("Catalog returned malformed categories")
        try:
            categories = [
                str(entry["slug"]) if isinstance(entry, dict) else str(entry)
                for entry in body
            ]
        except KeyError as exc:
            raise UpstreamUnavailableError(
                "Catalog returned malformed categories"
            ) from exc
        self._cache.set(CATEGORIES_KEY, categories)
        return list(categories)

    # --- Cache management -----------------------------------------------------

    def invalidate(self, key: str) -> None:
        self._cache.invalidate(key)

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("catalog.cache_cleared")

    # --- Internal helpers -----------------------------------------------------

    def _cached(self, key: str) -> Any | None:
        value = self._cache.get(key)
        if value is not None:
            logger.debug("catalog.cache_hit", key=key)
        else:
            logger.debug("catalog.cache_miss", key=key)
        return value

    def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        not_found_message: str | None = None,
    ) -> Any:
        logger.info("catalog.request", path=path, params=params)
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("catalog.unreachable", path=path, error=str(exc))
            raise UpstreamUnavailableError(
                f"Catalog request failed: {path}"
            ) from exc

        if response.status_code == 404 and not_found_message is not None:
            raise EntityNotFoundError(not_found_message)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "catalog.bad_status", path=path, status=response.status_code
            )
            raise UpstreamUnavailableError(
                f"Catalog responded with HTTP {response.status_code}"
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError("Catalog returned invalid JSON") from exc

    def _map_page(self, body: Any) -> list[Product]:
        if not isinstance(body, dict):
            raise UpstreamUnavailableError("Catalog returned a malformed page")
        raw_products = body.get("products") or []
        if not isinstance(raw_products, list):
            raise UpstreamUnavailableError("Catalog returned a malformed page")
        return [self._map_one(raw) for raw in raw_products]

    def _map_one(self, raw: Any) -> Product:
        try:
            return self._mapper.to_domain(raw)
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("catalog.malformed_record", error=str(exc))
            raise UpstreamUnavailableError(
                "Catalog returned a malformed product"
            ) from exc
