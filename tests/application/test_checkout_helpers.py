"""Tests for shipping quotes, address validation and user registration."""

import pytest

from storefront.application.checkout_helpers import (
    QuoteShippingHandler,
    ValidateAddressHandler,
)
from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import ConflictError, ValidationError
from tests.fakes import FakeUserRepository


class TestShippingQuote:

    @pytest.mark.parametrize(
        "count,additional,total",
        [(0, "$0.00", "$10.00"), (1, "$0.00", "$10.00"), (4, "$6.00", "$16.00")],
    )
    def test_quote(self, count, additional, total):
        quote = QuoteShippingHandler().handle(count)
        assert quote.base_cost == "$10.00"
        assert quote.additional_cost == additional
        assert quote.total == total

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            QuoteShippingHandler().handle(-1)


class TestValidateAddress:

    def test_complete_address_is_trimmed(self):
        address = ValidateAddressHandler().handle(
            {
                "street": " 1 Main St ",
                "city": "Springfield",
                "state": "IL",
                "zip_code": "62701",
                "country": "US",
                "note": "ignored",
            }
        )
        assert address["street"] == "1 Main St"
        assert "note" not in address

    def test_missing_fields_listed(self):
        with pytest.raises(ValidationError, match="Missing required fields: state, country"):
            ValidateAddressHandler().handle(
                {"street": "1 Main St", "city": "X", "zip_code": "1", "state": " "}
            )


class TestRegisterUser:

    def test_registers(self):
        repo = FakeUserRepository()
        user = RegisterUserHandler(repo).handle(" alice ", "alice@example.com")
        assert user.username == "alice"
        assert repo.get_by_id(user.id) is user

    def test_duplicate_email_conflicts(self):
        repo = FakeUserRepository()
        handler = RegisterUserHandler(repo)
        handler.handle("alice", "alice@example.com")
        with pytest.raises(ConflictError, match="already exists"):
            handler.handle("alice2", "ALICE@example.com")

    def test_duplicate_username_conflicts(self):
        repo = FakeUserRepository()
        handler = RegisterUserHandler(repo)
        handler.handle("alice", "alice@example.com")
        with pytest.raises(ConflictError):
            handler.handle("Alice", "other@example.com")

    @pytest.mark.parametrize(
        "username,email,message",
        [("", "a@x.io", "Username is required"), ("bob", "nope", "valid email")],
    )
    def test_bad_input_rejected(self, username, email, message):
        with pytest.raises(ValidationError, match=message):
            RegisterUserHandler(FakeUserRepository()).handle(username, email)
