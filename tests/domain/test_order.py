"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    parse_assignable_status,
)
from storefront.domain.model.payment import PaymentResult
from storefront.domain.model.value_objects import Money, Quantity

ADDRESS = {"street": "1 Main St", "city": "Springfield"}


def _make_item(product_id: str = "1", qty: int = 1, price: str = "10.00") -> OrderItem:
    """Helper to build a valid order item."""
    return OrderItem(product_id=product_id, quantity=Quantity(qty), price=Money.of(price))


def _place(
    subtotal: str = "100.00",
    payment: PaymentResult | None = None,
    items: list[OrderItem] | None = None,
) -> Order:
    return Order.place(
        user_id="u1",
        items=items if items is not None else [_make_item()],
        subtotal=Money.of(subtotal),
        shipping_address=ADDRESS,
        billing_address=ADDRESS,
        payment_method="card",
        payment=payment or PaymentResult.approved("PAY-1-abc"),
    )


class TestOrderPlacement:

    def test_amounts_for_100(self):
        order = _place("100.00")
        assert order.subtotal == Money.of("100.00")
        assert order.shipping == Money.of("10.00")
        assert order.tax == Money.of("8.00")
        assert order.total == Money.of("118.00")

    def test_total_is_subtotal_plus_shipping_plus_tax(self):
        order = _place("33.33")
        assert order.total == order.subtotal + order.shipping + order.tax
        assert order.tax == Money.of("2.67")

    def test_paid_order_is_confirmed(self):
        order = _place(payment=PaymentResult.approved("PAY-9-xyz"))
        assert order.status == OrderStatus.CONFIRMED
        assert order.payment_status == PaymentStatus.PAID
        assert order.payment_id == "PAY-9-xyz"
        assert order.is_paid

    def test_declined_payment_still_produces_an_order(self):
        order = _place(payment=PaymentResult.declined())
        assert order.status == OrderStatus.FAILED
        assert order.payment_status == PaymentStatus.FAILED
        assert order.payment_id is None

    def test_id_is_none_for_new_orders(self):
        assert _place().id is None  # assigned by repository

    def test_items_are_frozen_tuple(self):
        order = _place(items=[_make_item("1"), _make_item("2")])
        assert isinstance(order.items, tuple)
        assert order.item_count == 2

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _place(items=[])

    def test_zero_subtotal_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _place("0")

    def test_addresses_are_copied(self):
        address = {"street": "1 Main St"}
        order = Order.place(
            user_id="u1",
            items=[_make_item()],
            subtotal=Money.of("10"),
            shipping_address=address,
            billing_address=address,
            payment_method="card",
            payment=PaymentResult.declined(),
        )
        address["street"] = "changed"
        assert order.shipping_address == {"street": "1 Main St"}


class TestOrderItem:

    def test_line_total_calculation(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")

    def test_item_is_immutable(self):
        item = _make_item()
        with pytest.raises(AttributeError):
            item.price = Money.of("99.99")  # type: ignore[misc]


class TestStatusChange:

    @pytest.mark.parametrize("status", ["pending", "confirmed", "shipped", "delivered", "cancelled"])
    def test_assignable_statuses(self, status):
        order = _place()
        order.change_status(parse_assignable_status(status))
        assert order.status.value == status

    def test_status_change_leaves_amounts_alone(self):
        order = _place("100.00")
        order.change_status(OrderStatus.SHIPPED)
        assert order.total == Money.of("118.00")
        assert order.item_count == 1

    def test_status_change_touches_updated_at(self):
        order = _place()
        before = order.updated_at
        order.change_status(OrderStatus.DELIVERED)
        assert order.updated_at >= before

    def test_failed_is_not_assignable(self):
        with pytest.raises(ValidationError, match="Invalid status"):
            _place().change_status(OrderStatus.FAILED)

    @pytest.mark.parametrize("raw", ["bogus", "failed", "", None])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(ValidationError, match="Invalid status"):
            parse_assignable_status(raw)

    def test_parse_is_case_insensitive(self):
        assert parse_assignable_status(" Shipped ") == OrderStatus.SHIPPED
