"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_enrichment import CartEnricher
from storefront.application.dto import CartView
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.cart_repository import CartRepository


def require_user_id(user_id: str | None) -> str:
    if not user_id or not str(user_id).strip():
        raise ValidationError("User ID is required")
    return str(user_id).strip()


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, enricher: CartEnricher) -> None:
        self._cart_repo = cart_repo
        self._enricher = enricher

    def handle(self, user_id: str) -> CartView:
        """Return the user's cart with live product data.

        The cart is created on first access, so this never fails for a
        user without one.
        """
        cart = self._cart_repo.get_or_create(require_user_id(user_id))
        return self._enricher.enrich(cart)
