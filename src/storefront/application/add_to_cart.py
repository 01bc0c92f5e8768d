"""Application service: Add To Cart use case.

Adding a product already in the cart merges into the existing line.
The merge is delegated to ``CartRepository.add_quantity`` so it is a
single atomic step rather than a read followed by a write.
"""

from __future__ import annotations

import structlog

from storefront.application.cart_enrichment import CartEnricher
from storefront.application.dto import CartView
from storefront.application.show_cart import require_user_id
from storefront.domain.model.cart import normalize_product_id
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, enricher: CartEnricher) -> None:
        self._cart_repo = cart_repo
        self._enricher = enricher

    def handle(self, user_id: str, product_id: str, quantity: int = 1) -> CartView:
        # Validate everything before the store is touched.
        user_id = require_user_id(user_id)
        product_id = normalize_product_id(product_id)
        qty = Quantity(quantity)

        cart = self._cart_repo.get_or_create(user_id)
        item = self._cart_repo.add_quantity(cart.id, product_id, qty.value)
        logger.info(
            "cart.item_added",
            cart_id=cart.id,
            product_id=product_id,
            added=qty.value,
            quantity=item.quantity,
        )

        return self._enricher.enrich(self._cart_repo.get_or_create(user_id))
