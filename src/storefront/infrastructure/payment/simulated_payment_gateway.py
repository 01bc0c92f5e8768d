"""Stand-in payment provider: approves a fixed share of charges.

Randomness and time are injected so a seeded instance always produces
the same sequence of outcomes and payment ids.
"""

from __future__ import annotations

import random
import string
import time
from collections.abc import Callable

import structlog

from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.payment import PaymentResult
from storefront.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
PAYMENT_SUFFIX_LENGTH = 9


class SimulatedPaymentGateway(PaymentGateway):

    def __init__(
        self,
        success_rate: float = 0.9,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not 0 <= success_rate <= 1:
            raise ValueError("success_rate must be between 0 and 1")
        self._success_rate = success_rate
        self._rng = rng or random.Random()
        self._clock = clock

    def charge(self, amount: Money, payment_method: str) -> PaymentResult:
        # random() is in [0, 1): a rate of 1.0 always approves, 0.0 never does.
        if self._rng.random() < self._success_rate:
            result = PaymentResult.approved(self._payment_id())
        else:
            result = PaymentResult.declined()
        logger.info(
            "payment.charged",
            amount=str(amount),
            method=payment_method,
            success=result.success,
            payment_id=result.payment_id,
        )
        return result

    def _payment_id(self) -> str:
        millis = int(self._clock() * 1000)
        suffix = "".join(self._rng.choice(_BASE36) for _ in range(PAYMENT_SUFFIX_LENGTH))
        return f"PAY-{millis}-{suffix}"
