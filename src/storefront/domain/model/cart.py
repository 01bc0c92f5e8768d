"""Cart aggregate, one per user, holding merged quantities per product.

Invariants:
- a user owns at most one Cart
- a Cart holds at most one CartItem per product (adds merge by summing)
- every CartItem quantity is a positive integer
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Quantity


@dataclass
class CartItem:
    id: str
    cart_id: str
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        Quantity(self.quantity)

    def merge(self, quantity: Quantity) -> None:
        """Add *quantity* units of the same product to this line."""
        self.quantity += quantity.value

    def change_quantity(self, quantity: Quantity) -> None:
        self.quantity = quantity.value


@dataclass
class Cart:
    id: str
    user_id: str
    items: list[CartItem] = field(default_factory=list)

    def find_item(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, item_id: str, product_id: str, quantity: Quantity) -> CartItem:
        """Merge into the product's line, or open a new line as *item_id*."""
        item = self.find_item(product_id)
        if item is None:
            item = CartItem(item_id, self.id, product_id, quantity.value)
            self.items.append(item)
        else:
            item.merge(quantity)
        return item

    def get_line(self, item_id: str) -> CartItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


def normalize_product_id(product_id: object) -> str:
    """Catalog ids arrive as ints or strings; carts always store strings."""
    if product_id is None or isinstance(product_id, bool):
        raise ValidationError("Product ID is required")
    text = str(product_id).strip()
    if not text:
        raise ValidationError("Product ID is required")
    return text
