"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from storefront.application.cart_enrichment import CartEnricher
from storefront.application.dto import CartView
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository


class RemoveCartItemHandler:

    def __init__(self, cart_repo: CartRepository, enricher: CartEnricher) -> None:
        self._cart_repo = cart_repo
        self._enricher = enricher

    def handle(self, item_id: str) -> CartView:
        item = self._cart_repo.get_item(item_id)
        if item is None or not self._cart_repo.delete_item(item_id):
            raise EntityNotFoundError("Item not found in cart")

        cart = self._cart_repo.get_by_id(item.cart_id)
        if cart is None:
            raise EntityNotFoundError("Item not found in cart")
        return self._enricher.enrich(cart)
