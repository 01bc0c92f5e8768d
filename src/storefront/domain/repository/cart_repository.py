"""Abstract repository for Cart aggregate.

Quantity changes go through dedicated methods instead of a generic
``save`` so implementations can apply them atomically; two concurrent
adds of the same product must both be counted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart, CartItem


class CartRepository(ABC):

    @abstractmethod
    def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart with its items, or None."""

    @abstractmethod
    def get_by_id(self, cart_id: str) -> Cart | None:
        """Return a cart with its items, or None."""

    @abstractmethod
    def get_or_create(self, user_id: str) -> Cart:
        """Return the user's cart, creating an empty one if needed."""

    @abstractmethod
    def get_item(self, item_id: str) -> CartItem | None:
        """Return a cart item by its ID, or None."""

    @abstractmethod
    def add_quantity(self, cart_id: str, product_id: str, quantity: int) -> CartItem:
        """Atomically merge *quantity* into the (cart, product) line.

        Creates the line when it does not exist yet.
        """

    @abstractmethod
    def set_quantity(self, item_id: str, quantity: int) -> CartItem | None:
        """Overwrite an item's quantity; None if the item does not exist."""

    @abstractmethod
    def delete_item(self, item_id: str) -> bool:
        """Delete one item; False if it did not exist."""

    @abstractmethod
    def clear(self, cart_id: str) -> None:
        """Delete every item of a cart."""
