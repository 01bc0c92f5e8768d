"""Cart enrichment: joins stored cart lines with live catalog data.

Display is best-effort over catalog availability: a line whose product
cannot be fetched is returned with ``product=None`` instead of failing
the whole cart.  Lookups run concurrently; one failure never cancels
the others.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import structlog

from storefront.application.dto import CartLineView, CartView
from storefront.domain.exceptions import EntityNotFoundError, UpstreamUnavailableError
from storefront.domain.gateway.catalog_gateway import CatalogGateway
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.product import Product

logger = structlog.get_logger(__name__)


class CartEnricher:

    def __init__(self, catalog: CatalogGateway, max_workers: int = 8) -> None:
        self._catalog = catalog
        self._max_workers = max_workers

    def enrich(self, cart: Cart) -> CartView:
        if cart.is_empty:
            return CartView(id=cart.id, user_id=cart.user_id, lines=[])

        workers = min(self._max_workers, len(cart.items))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            products = list(pool.map(self._lookup, cart.items))

        lines = [
            CartLineView(
                item_id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                product=product,
            )
            for item, product in zip(cart.items, products)
        ]
        return CartView(id=cart.id, user_id=cart.user_id, lines=lines)

    def _lookup(self, item: CartItem) -> Product | None:
        try:
            return self._catalog.fetch_by_id(item.product_id)
        except (EntityNotFoundError, UpstreamUnavailableError) as exc:
            logger.warning(
                "cart.line_degraded",
                cart_id=item.cart_id,
                product_id=item.product_id,
                reason=str(exc),
            )
            return None
