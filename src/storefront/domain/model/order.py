"""Order aggregate: the immutable record of a checkout attempt.

The Order is an aggregate root that owns its line items.  Items and
amounts are fixed by ``Order.place()``; afterwards only the status can
move, through ``change_status()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.payment import PaymentResult
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    FAILED = "failed"


class PaymentStatus(Enum):
    PAID = "paid"
    FAILED = "failed"


# Targets reachable through a status update. FAILED is only ever set by checkout.
ASSIGNABLE_STATUSES = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
    OrderStatus.CANCELLED,
)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_COST = Money(Decimal("10.00"))
TAX_RATE = Decimal("0.08")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """Price snapshot of one cart line at checkout time.

    Never re-derived from the catalog afterwards.
    """

    product_id: str
    quantity: Quantity
    price: Money

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.place()`` factory for new orders; it computes the
    amounts.  The ``__init__`` is intentionally simple so the repository
    can reconstitute persisted orders without recomputing anything.
    """

    id: int | None
    user_id: str
    items: tuple[OrderItem, ...]
    subtotal: Money
    shipping: Money
    tax: Money
    total: Money
    shipping_address: dict[str, str]
    billing_address: dict[str, str]
    payment_method: str
    status: OrderStatus
    payment_status: PaymentStatus
    payment_id: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        user_id: str,
        items: list[OrderItem],
        subtotal: Money,
        shipping_address: dict[str, str],
        billing_address: dict[str, str],
        payment_method: str,
        payment: PaymentResult,
    ) -> Order:
        """Create the order for a checkout attempt, paid or not.

        ``subtotal`` is the client-supplied cart total; shipping and tax
        are added on top of it.
        """
        if not items:
            raise ValidationError("Order must contain at least one item")
        if subtotal.is_zero:
            raise ValidationError("Order subtotal must be greater than zero")

        tax = subtotal.percent(TAX_RATE)
        if payment.success:
            status, payment_status = OrderStatus.CONFIRMED, PaymentStatus.PAID
        else:
            status, payment_status = OrderStatus.FAILED, PaymentStatus.FAILED

        return Order(
            id=None,
            user_id=user_id,
            items=tuple(items),
            subtotal=subtotal,
            shipping=SHIPPING_COST,
            tax=tax,
            total=subtotal + SHIPPING_COST + tax,
            shipping_address=dict(shipping_address),
            billing_address=dict(billing_address),
            payment_method=payment_method,
            status=status,
            payment_status=payment_status,
            payment_id=payment.payment_id if payment.success else None,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        if new_status not in ASSIGNABLE_STATUSES:
            raise ValidationError(f"Invalid status: {new_status.value}")
        self.status = new_status
        self.updated_at = _utcnow()

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID


def parse_assignable_status(raw: str | None) -> OrderStatus:
    """Map user input onto an assignable status or raise ValidationError."""
    allowed = {s.value: s for s in ASSIGNABLE_STATUSES}
    key = (raw or "").strip().lower()
    if key not in allowed:
        raise ValidationError(
            f"Invalid status '{raw}'. Expected one of: {', '.join(allowed)}"
        )
    return allowed[key]
