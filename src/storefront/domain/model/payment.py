"""Outcome of a payment attempt.

Never persisted on its own; checkout folds it into the Order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentResult:
    success: bool
    message: str
    payment_id: str | None = None

    @staticmethod
    def approved(payment_id: str) -> PaymentResult:
        return PaymentResult(
            success=True,
            message="Payment processed successfully",
            payment_id=payment_id,
        )

    @staticmethod
    def declined(message: str = "Payment failed") -> PaymentResult:
        return PaymentResult(success=False, message=message)
