"""Application services: shipping quote and address validation.

Both are pre-checkout conveniences; neither touches a repository.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.application.dto import ShippingQuoteDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

BASE_SHIPPING = Money(Decimal("10.00"))
PER_EXTRA_ITEM = Money(Decimal("2.00"))
ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


class QuoteShippingHandler:

    def handle(self, item_count: int) -> ShippingQuoteDTO:
        """Base cost plus a surcharge for every item beyond the first."""
        if item_count < 0:
            raise ValidationError("Item count cannot be negative")
        additional = PER_EXTRA_ITEM * max(item_count - 1, 0)
        return ShippingQuoteDTO(
            base_cost=str(BASE_SHIPPING),
            additional_cost=str(additional),
            total=str(BASE_SHIPPING + additional),
        )


class ValidateAddressHandler:

    def handle(self, address: dict[str, str] | None) -> dict[str, str]:
        address = address or {}
        missing = [f for f in ADDRESS_FIELDS if not str(address.get(f) or "").strip()]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return {f: str(address[f]).strip() for f in ADDRESS_FIELDS}
