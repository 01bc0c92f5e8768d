"""Application service: Process Checkout use case.

Turns a client-supplied cart snapshot into a persisted Order.

Prices come from the snapshot, not from the catalog: the client total
becomes the subtotal and fixed shipping plus tax are added on top.  The
order is recorded whatever the payment outcome, so failed attempts stay
auditable; a declined payment yields an order in ``failed`` status.

Setting ``verify_prices`` re-fetches every line from the catalog before
charging and rejects snapshots whose prices drifted.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import structlog

from storefront.application.dto import (
    CheckoutLineSpec,
    CheckoutReceiptDTO,
    CheckoutRequest,
)
from storefront.domain.exceptions import (
    EntityNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from storefront.domain.gateway.catalog_gateway import CatalogGateway
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.cart import normalize_product_id
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.payment import PaymentResult
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class ProcessCheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        payment_gateway: PaymentGateway,
        catalog: CatalogGateway | None = None,
        verify_prices: bool = False,
        price_tolerance: Decimal = Decimal("0.01"),
    ) -> None:
        if verify_prices and catalog is None:
            raise ValueError("verify_prices requires a catalog gateway")
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._payment_gateway = payment_gateway
        # Only kept when lines are re-priced against it.
        self._price_source = catalog if verify_prices else None
        self._price_tolerance = price_tolerance

    def handle(self, request: CheckoutRequest) -> CheckoutReceiptDTO:
        """Run the checkout pipeline.

        Steps:
        1. Validate the snapshot (items, total, each line).
        2. Validate addresses, payment method and user id.
        3. Resolve the user.
        4. Remember the shipping address if the user has none.
        5. Charge the payment step.
        6. Freeze the lines into OrderItems.
        7. Persist the order, paid or failed.
        """
        if not request.cart_items:
            raise ValidationError("Cart items are required")
        subtotal = self._parse_total(request.total)
        items = [self._to_order_item(line) for line in request.cart_items]

        if (
            not request.shipping_address
            or not request.billing_address
            or not request.payment_method
        ):
            raise ValidationError(
                "Shipping address, billing address, and payment method are required"
            )
        shipping_address = self._parse_address(request.shipping_address)
        billing_address = self._parse_address(request.billing_address)
        payment_method = str(request.payment_method)
        if not request.user_id:
            raise ValidationError("User ID is required")

        user = self._user_repo.get_by_id(request.user_id)
        if user is None:
            raise EntityNotFoundError("User not found")

        if self._price_source is not None:
            self._verify_against_catalog(self._price_source, items)

        if not user.has_address:
            user.remember_address(shipping_address)
            self._user_repo.save(user)

        # Every order input is final here; nothing after the charge may reject it.
        payment = self._charge(subtotal, payment_method)

        order = Order.place(
            user_id=user.id,
            items=items,
            subtotal=subtotal,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method,
            payment=payment,
        )
        self._order_repo.save(order)
        logger.info(
            "checkout.order_recorded",
            order_id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            total=str(order.total),
        )

        return CheckoutReceiptDTO(
            id=order.id,  # type: ignore[arg-type]
            status=order.status.value,
            payment_status=order.payment_status.value,
            payment_id=order.payment_id,
            total=str(order.total),
            item_count=order.item_count,
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _parse_total(raw: object) -> Money:
        if raw is None or isinstance(raw, bool):
            raise ValidationError("Valid total amount is required")
        try:
            amount = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError("Valid total amount is required") from exc
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Valid total amount is required")
        return Money(amount)

    @staticmethod
    def _to_order_item(line: CheckoutLineSpec) -> OrderItem:
        # Only product id, quantity and price survive into the order.
        return OrderItem(
            product_id=normalize_product_id(line.product_id),
            quantity=Quantity(line.quantity),
            price=Money.of(line.price),
        )

    @staticmethod
    def _parse_address(raw: object) -> dict[str, str]:
        if not isinstance(raw, dict):
            raise ValidationError("Shipping and billing addresses must be objects")
        return dict(raw)

    def _verify_against_catalog(
        self, catalog: CatalogGateway, items: list[OrderItem]
    ) -> None:
        for item in items:
            live = catalog.fetch_by_id(item.product_id)
            drift = abs(live.price.amount - item.price.amount)
            if drift > self._price_tolerance:
                raise ValidationError(
                    f"Price of product {item.product_id} changed: "
                    f"cart has {item.price}, catalog has {live.price}"
                )

    def _charge(self, amount: Money, payment_method: str) -> PaymentResult:
        try:
            return self._payment_gateway.charge(amount, payment_method)
        except UpstreamUnavailableError as exc:
            logger.warning("checkout.payment_unavailable", error=str(exc))
            return PaymentResult.declined(str(exc))
