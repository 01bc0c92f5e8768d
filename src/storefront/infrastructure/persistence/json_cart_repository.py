"""JSON-file-backed implementation of CartRepository.

Every read-modify-write runs inside ``JsonFileStore.update``, so quantity
merges stay atomic across repository instances and processes.
"""

from __future__ import annotations

import uuid
from pathlib import Path

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    # --- CartRepository interface ---------------------------------------------

    def get_by_user(self, user_id: str) -> Cart | None:
        for raw in self._store.read():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_id(self, cart_id: str) -> Cart | None:
        for raw in self._store.read():
            if raw["id"] == cart_id:
                return self._to_domain(raw)
        return None

    def get_or_create(self, user_id: str) -> Cart:
        with self._store.update() as carts:
            for raw in carts:
                if raw["user_id"] == user_id:
                    return self._to_domain(raw)
            cart = Cart(id=uuid.uuid4().hex, user_id=user_id)
            carts.append(self._to_raw(cart))
            return cart

    def get_item(self, item_id: str) -> CartItem | None:
        for raw in self._store.read():
            item = self._to_domain(raw).get_line(item_id)
            if item is not None:
                return item
        return None

    def add_quantity(self, cart_id: str, product_id: str, quantity: int) -> CartItem:
        with self._store.update() as carts:
            index, cart = self._find_cart(carts, cart_id)
            item = cart.add_item(uuid.uuid4().hex, product_id, Quantity(quantity))
            carts[index] = self._to_raw(cart)
            return item

    def set_quantity(self, item_id: str, quantity: int) -> CartItem | None:
        with self._store.update() as carts:
            for index, raw in enumerate(carts):
                cart = self._to_domain(raw)
                item = cart.get_line(item_id)
                if item is not None:
                    item.change_quantity(Quantity(quantity))
                    carts[index] = self._to_raw(cart)
                    return item
            return None

    def delete_item(self, item_id: str) -> bool:
        with self._store.update() as carts:
            for raw in carts:
                remaining = [i for i in raw["items"] if i["id"] != item_id]
                if len(remaining) != len(raw["items"]):
                    raw["items"] = remaining
                    return True
            return False

    def clear(self, cart_id: str) -> None:
        with self._store.update() as carts:
            index, cart = self._find_cart(carts, cart_id)
            cart.items.clear()
            carts[index] = self._to_raw(cart)

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _find_cart(cls, carts: list[dict], cart_id: str) -> tuple[int, Cart]:
        for index, raw in enumerate(carts):
            if raw["id"] == cart_id:
                return index, cls._to_domain(raw)
        raise KeyError(f"Cart {cart_id} does not exist")

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "items": [
                {"id": i.id, "product_id": i.product_id, "quantity": i.quantity}
                for i in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            id=raw["id"],
            user_id=raw["user_id"],
            items=[
                CartItem(
                    id=i["id"],
                    cart_id=raw["id"],
                    product_id=i["product_id"],
                    quantity=i["quantity"],
                )
                for i in raw["items"]
            ],
        )
