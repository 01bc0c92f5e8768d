"""Integration tests for the checkout pipeline.

Uses in-memory fakes with a fixed payment outcome.
"""

from decimal import Decimal

import pytest

from storefront.application.dto import CheckoutLineSpec, CheckoutRequest
from storefront.application.process_checkout import ProcessCheckoutHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeCatalogGateway,
    FakeOrderRepository,
    FakeUserRepository,
    FixedPaymentGateway,
    UnreachablePaymentGateway,
    make_product,
)

SHIP_TO = {
    "street": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
    "country": "US",
}


def _request(**overrides) -> CheckoutRequest:
    fields = dict(
        cart_items=[
            CheckoutLineSpec(product_id="1", quantity=2, price="10.00"),
            CheckoutLineSpec(product_id="2", quantity=1, price="5.00"),
        ],
        total="25.00",
        shipping_address=SHIP_TO,
        billing_address=SHIP_TO,
        payment_method="credit_card",
        user_id="u1",
    )
    fields.update(overrides)
    return CheckoutRequest(**fields)


def _setup(succeed: bool = True, address: dict | None = None):
    order_repo = FakeOrderRepository()
    user_repo = FakeUserRepository(
        [User(id="u1", username="alice", email="alice@example.com", address=address)]
    )
    payment = FixedPaymentGateway(succeed=succeed)
    handler = ProcessCheckoutHandler(order_repo, user_repo, payment)
    return handler, order_repo, user_repo, payment


class TestSuccessfulCheckout:

    def test_confirmed_order_with_totals(self):
        handler, order_repo, _, _ = _setup()

        receipt = handler.handle(_request())

        assert receipt.status == "confirmed"
        assert receipt.payment_status == "paid"
        assert receipt.payment_id == "PAY-1-abcdefghi"
        assert receipt.total == "$37.00"
        assert receipt.item_count == 2

        order = order_repo.get_by_id(receipt.id)
        assert order.subtotal == Money.of("25.00")
        assert order.shipping == Money.of("10.00")
        assert order.tax == Money.of("2.00")

    def test_total_of_100_becomes_118(self):
        handler, _, _, _ = _setup()
        receipt = handler.handle(
            _request(
                cart_items=[CheckoutLineSpec("1", 1, "100")],
                total=100,
            )
        )
        assert receipt.total == "$118.00"

    def test_payment_charged_for_subtotal(self):
        handler, _, _, payment = _setup()
        handler.handle(_request())
        assert payment.charges == [(Decimal("25.00"), "credit_card")]

    def test_client_total_is_trusted(self):
        handler, order_repo, _, _ = _setup()
        receipt = handler.handle(_request(total="40.00"))
        assert order_repo.get_by_id(receipt.id).subtotal == Money.of("40.00")

    def test_order_lines_keep_snapshot_prices(self):
        handler, order_repo, _, _ = _setup()
        receipt = handler.handle(_request())
        order = order_repo.get_by_id(receipt.id)
        assert [(i.product_id, i.quantity.value, str(i.price)) for i in order.items] == [
            ("1", 2, "$10.00"),
            ("2", 1, "$5.00"),
        ]

    def test_order_ids_increase(self):
        handler, _, _, _ = _setup()
        first = handler.handle(_request())
        second = handler.handle(_request())
        assert second.id > first.id


class TestFailedPayment:

    def test_declined_payment_still_records_order(self):
        handler, order_repo, _, _ = _setup(succeed=False)

        receipt = handler.handle(_request())

        assert receipt.status == "failed"
        assert receipt.payment_status == "failed"
        assert receipt.payment_id is None
        order = order_repo.get_by_id(receipt.id)
        assert order is not None
        assert order.status == OrderStatus.FAILED
        assert order.total == Money.of("37.00")

    def test_unreachable_provider_counts_as_failed_payment(self):
        order_repo = FakeOrderRepository()
        user_repo = FakeUserRepository([User(id="u1", username="a", email="a@x.io")])
        handler = ProcessCheckoutHandler(order_repo, user_repo, UnreachablePaymentGateway())

        receipt = handler.handle(_request())

        assert receipt.status == "failed"
        assert order_repo.get_by_id(receipt.id) is not None


class TestUserAddress:

    def test_address_remembered_when_user_has_none(self):
        handler, _, user_repo, _ = _setup()
        handler.handle(_request())
        assert user_repo.get_by_id("u1").address == SHIP_TO

    def test_existing_address_left_alone(self):
        home = {"street": "9 Elm St", "city": "Shelbyville"}
        handler, _, user_repo, _ = _setup(address=home)
        handler.handle(_request())
        assert user_repo.get_by_id("u1").address == home
        assert user_repo.saves == 0


class TestValidation:

    def test_empty_cart_rejected(self):
        handler, order_repo, _, payment = _setup()
        with pytest.raises(ValidationError, match="Cart items are required"):
            handler.handle(_request(cart_items=[]))
        assert payment.charges == []

    @pytest.mark.parametrize("total", [None, 0, -5, "abc", "NaN"])
    def test_bad_total_rejected(self, total):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Valid total amount is required"):
            handler.handle(_request(total=total))

    @pytest.mark.parametrize(
        "field", ["shipping_address", "billing_address", "payment_method"]
    )
    def test_missing_checkout_detail_rejected(self, field):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="payment method are required"):
            handler.handle(_request(**{field: None}))

    def test_missing_user_id_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="User ID is required"):
            handler.handle(_request(user_id=""))

    def test_unknown_user_not_found(self):
        handler, _, _, payment = _setup()
        with pytest.raises(EntityNotFoundError, match="User not found"):
            handler.handle(_request(user_id="ghost"))
        assert payment.charges == []

    def test_bad_line_rejected_before_anything_happens(self):
        handler, order_repo, user_repo, payment = _setup()
        lines = [
            CheckoutLineSpec("1", 1, "10.00"),
            CheckoutLineSpec("2", 0, "5.00"),
        ]
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_request(cart_items=lines))
        assert payment.charges == []
        assert user_repo.saves == 0
        assert order_repo.next_id() == 1

    def test_line_without_product_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Product ID is required"):
            handler.handle(_request(cart_items=[CheckoutLineSpec(None, 1, "10")]))

    @pytest.mark.parametrize("address", ["1 Main St, Springfield", 42, ["1 Main St"]])
    @pytest.mark.parametrize("known_address", [None, {"street": "9 Elm St"}])
    def test_non_object_address_rejected_before_charging(self, address, known_address):
        handler, order_repo, user_repo, payment = _setup(address=known_address)
        with pytest.raises(ValidationError, match="must be objects"):
            handler.handle(_request(shipping_address=address))
        assert payment.charges == []
        assert user_repo.saves == 0
        assert order_repo.next_id() == 1

    def test_non_object_billing_address_rejected(self):
        handler, _, _, payment = _setup()
        with pytest.raises(ValidationError, match="must be objects"):
            handler.handle(_request(billing_address="same as shipping"))
        assert payment.charges == []


class TestPriceVerification:

    def _handler(self, live_price: str):
        catalog = FakeCatalogGateway(
            [make_product("1", price=live_price), make_product("2", price="5.00")]
        )
        order_repo = FakeOrderRepository()
        user_repo = FakeUserRepository([User(id="u1", username="a", email="a@x.io")])
        payment = FixedPaymentGateway()
        handler = ProcessCheckoutHandler(
            order_repo, user_repo, payment, catalog=catalog, verify_prices=True
        )
        return handler, payment

    def test_matching_prices_pass(self):
        handler, _ = self._handler("10.00")
        assert handler.handle(_request()).status == "confirmed"

    def test_drifted_price_rejected_without_charging(self):
        handler, payment = self._handler("12.00")
        with pytest.raises(ValidationError, match="Price of product 1 changed"):
            handler.handle(_request())
        assert payment.charges == []

    def test_verification_requires_catalog(self):
        with pytest.raises(ValueError):
            ProcessCheckoutHandler(
                FakeOrderRepository(),
                FakeUserRepository(),
                FixedPaymentGateway(),
                verify_prices=True,
            )

    def test_catalog_ignored_when_verification_off(self):
        catalog = FakeCatalogGateway([make_product("1", price="99.00")])
        handler = ProcessCheckoutHandler(
            FakeOrderRepository(),
            FakeUserRepository([User(id="u1", username="a", email="a@x.io")]),
            FixedPaymentGateway(),
            catalog=catalog,
        )
        assert handler.handle(_request()).status == "confirmed"
        assert catalog.calls == []


class TestCheckoutPayload:

    def test_from_payload_ignores_extra_line_keys(self):
        request = CheckoutRequest.from_payload(
            {
                "cart_items": [
                    {"product_id": 1, "quantity": 2, "price": 10, "name": "Sneaker"}
                ],
                "total": 20,
                "shipping_address": SHIP_TO,
                "billing_address": SHIP_TO,
                "payment_method": "card",
                "user_id": "u1",
            }
        )
        assert request.cart_items == [CheckoutLineSpec(1, 2, 10)]
        assert request.total == 20

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError, match="JSON object"):
            CheckoutRequest.from_payload([])  # type: ignore[arg-type]

    def test_from_payload_accepts_camel_case_keys(self):
        request = CheckoutRequest.from_payload(
            {
                "cartItems": [{"productId": 3, "quantity": 1, "price": "9.99"}],
                "total": "9.99",
                "shippingAddress": SHIP_TO,
                "billingAddress": SHIP_TO,
                "paymentMethod": "card",
                "userId": "u1",
            }
        )
        assert request.cart_items == [CheckoutLineSpec(3, 1, "9.99")]
        assert request.shipping_address == SHIP_TO
        assert request.payment_method == "card"
        assert request.user_id == "u1"

    def test_camel_case_snapshot_checks_out(self):
        handler, _, _, _ = _setup()
        request = CheckoutRequest.from_payload(
            {
                "cartItems": [{"productId": 1, "quantity": 2, "price": 10}],
                "total": 20,
                "shippingAddress": SHIP_TO,
                "billingAddress": SHIP_TO,
                "paymentMethod": "card",
                "userId": "u1",
            }
        )
        assert handler.handle(request).total == "$31.60"
