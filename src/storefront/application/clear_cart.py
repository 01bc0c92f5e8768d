"""Application service: Clear Cart use case.

Clearing a cart that was never created is not an error; the caller gets
an empty view either way.
"""

from __future__ import annotations

from storefront.application.dto import CartView
from storefront.application.show_cart import require_user_id
from storefront.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> CartView:
        user_id = require_user_id(user_id)
        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            return CartView(id=None, user_id=user_id, lines=[])

        self._cart_repo.clear(cart.id)
        return CartView(id=cart.id, user_id=user_id, lines=[])
