"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product

# --- Checkout input ----------------------------------------------------------


@dataclass(frozen=True)
class CheckoutLineSpec:
    """Input: one line of the client's cart snapshot, price included."""

    product_id: Any
    quantity: Any
    price: Any


@dataclass(frozen=True)
class CheckoutRequest:
    """Input: the whole client-side cart snapshot submitted at checkout."""

    cart_items: list[CheckoutLineSpec]
    total: str | int | float | Decimal | None
    shipping_address: dict[str, str] | None
    billing_address: dict[str, str] | None
    payment_method: str | None
    user_id: str | None

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> CheckoutRequest:
        """Build a request from a decoded JSON document.

        Keys may be snake_case or camelCase (``cart_items`` or ``cartItems``,
        ``product_id`` or ``productId``, ...).  Only the shape is checked
        here; values are validated by checkout.  Extra keys on each line
        (name, image, ...) are ignored.
        """
        if not isinstance(payload, dict):
            raise ValidationError("Checkout payload must be a JSON object")
        raw_items = _field(payload, "cart_items") or []
        if not isinstance(raw_items, list):
            raise ValidationError("Cart items must be a list")
        lines = []
        for raw in raw_items:
            if not isinstance(raw, dict):
                raise ValidationError("Each cart item must be an object")
            lines.append(
                CheckoutLineSpec(
                    product_id=_field(raw, "product_id"),
                    quantity=raw.get("quantity"),
                    price=raw.get("price"),
                )
            )
        return CheckoutRequest(
            cart_items=lines,
            total=payload.get("total"),
            shipping_address=_field(payload, "shipping_address"),
            billing_address=_field(payload, "billing_address"),
            payment_method=_field(payload, "payment_method"),
            user_id=_field(payload, "user_id"),
        )


def _field(raw: dict[str, Any], snake_name: str) -> Any:
    """Read *snake_name*, falling back to its camelCase spelling."""
    if snake_name in raw:
        return raw[snake_name]
    head, *rest = snake_name.split("_")
    return raw.get(head + "".join(part.title() for part in rest))


# --- Order output ------------------------------------------------------------


@dataclass(frozen=True)
class CheckoutReceiptDTO:
    """Output: what a client learns right after checkout."""

    id: int
    status: str
    payment_status: str
    payment_id: str | None
    total: str
    item_count: int


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    user_id: str
    status: str
    payment_status: str
    payment_id: str | None
    items: list[OrderItemDTO]
    subtotal: str
    shipping: str
    tax: str
    total: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    per_page: int

    @staticmethod
    def of(page: int, limit: int, total_items: int) -> Pagination:
        return Pagination(
            current_page=page,
            total_pages=math.ceil(total_items / limit),
            total_items=total_items,
            per_page=limit,
        )


@dataclass(frozen=True)
class OrderPageDTO:
    orders: list[OrderDTO]
    pagination: Pagination


# --- Catalog output ----------------------------------------------------------


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[Product]
    pagination: Pagination


@dataclass(frozen=True)
class ShippingQuoteDTO:
    base_cost: str
    additional_cost: str
    total: str


# --- Cart output -------------------------------------------------------------


@dataclass(frozen=True)
class CartLineView:
    """One stored cart line joined with live catalog data.

    ``product`` is None when the catalog lookup for this line failed.
    """

    item_id: str
    product_id: str
    quantity: int
    product: Product | None

    @property
    def degraded(self) -> bool:
        return self.product is None


@dataclass(frozen=True)
class CartView:
    id: str | None
    user_id: str
    lines: list[CartLineView] = field(default_factory=list)

    @property
    def degraded_count(self) -> int:
        return sum(1 for line in self.lines if line.degraded)


def validate_paging(page: int, limit: int) -> None:
    if page < 1:
        raise ValidationError("Page must be 1 or greater")
    if limit < 1:
        raise ValidationError("Limit must be 1 or greater")
