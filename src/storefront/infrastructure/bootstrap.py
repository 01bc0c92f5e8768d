"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers and
the only reader of settings.  Every other module depends only on
abstractions and receives its collaborators through the constructor.
"""

from __future__ import annotations

from functools import lru_cache

import httpx

from storefront.application.cart_enrichment import CartEnricher
from storefront.application.process_checkout import ProcessCheckoutHandler
from storefront.infrastructure.cache.ttl_cache import TTLCache
from storefront.infrastructure.catalog.http_catalog_gateway import HttpCatalogGateway
from storefront.infrastructure.config.settings import StorefrontSettings
from storefront.infrastructure.observability.logging_setup import configure_logging
from storefront.infrastructure.payment.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


@lru_cache(maxsize=1)
def settings() -> StorefrontSettings:
    return StorefrontSettings()


def reset() -> None:
    """Drop cached settings and shared instances (used after env changes)."""
    settings.cache_clear()
    catalog_gateway.cache_clear()


def init_logging() -> None:
    cfg = settings()
    configure_logging(level=cfg.log_level, fmt=cfg.log_format.value)


# --- Repositories -------------------------------------------------------------


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


# --- External collaborators ---------------------------------------------------


@lru_cache(maxsize=1)
def catalog_gateway() -> HttpCatalogGateway:
    """One gateway, and so one cache, per process."""
    cfg = settings()
    client = httpx.Client(
        base_url=cfg.catalog_base_url,
        timeout=cfg.catalog_timeout_seconds,
        headers={"Accept": "application/json"},
    )
    return HttpCatalogGateway(client=client, cache=TTLCache(cfg.cache_ttl_seconds))


def payment_gateway() -> SimulatedPaymentGateway:
    return SimulatedPaymentGateway(success_rate=settings().payment_success_rate)


def cart_enricher() -> CartEnricher:
    return CartEnricher(catalog_gateway(), max_workers=settings().enrichment_workers)


def checkout_handler() -> ProcessCheckoutHandler:
    cfg = settings()
    return ProcessCheckoutHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        payment_gateway=payment_gateway(),
        catalog=catalog_gateway() if cfg.verify_prices else None,
        verify_prices=cfg.verify_prices,
        price_tolerance=cfg.price_tolerance,
    )
