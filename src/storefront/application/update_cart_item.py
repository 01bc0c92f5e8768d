"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.cart_enrichment import CartEnricher
from storefront.application.dto import CartView
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository, enricher: CartEnricher) -> None:
        self._cart_repo = cart_repo
        self._enricher = enricher

    def handle(self, item_id: str, quantity: int) -> CartView:
        """Overwrite a line's quantity and return the refreshed cart."""
        qty = Quantity(quantity)

        item = self._cart_repo.set_quantity(item_id, qty.value)
        if item is None:
            raise EntityNotFoundError("Item not found in cart")

        cart = self._cart_repo.get_by_id(item.cart_id)
        if cart is None:
            raise EntityNotFoundError("Item not found in cart")
        return self._enricher.enrich(cart)
