"""Port for the payment step of checkout."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.payment import PaymentResult
from storefront.domain.model.value_objects import Money


class PaymentGateway(ABC):

    @abstractmethod
    def charge(self, amount: Money, payment_method: str) -> PaymentResult:
        """Attempt a payment.

        A declined payment is a normal result, not an exception.  Raise
        UpstreamUnavailableError only when the provider cannot be reached.
        """
