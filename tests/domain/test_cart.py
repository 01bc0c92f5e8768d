"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartItem, normalize_product_id
from storefront.domain.model.value_objects import Quantity


class TestCartItem:

    def test_merge_sums_quantities(self):
        item = CartItem(id="i1", cart_id="c1", product_id="1", quantity=2)
        item.merge(Quantity(2))
        assert item.quantity == 4

    def test_change_quantity(self):
        item = CartItem(id="i1", cart_id="c1", product_id="1", quantity=2)
        item.change_quantity(Quantity(7))
        assert item.quantity == 7

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            CartItem(id="i1", cart_id="c1", product_id="1", quantity=0)


class TestCart:

    def test_find_item_by_product(self):
        cart = Cart(
            id="c1",
            user_id="u1",
            items=[
                CartItem("i1", "c1", "1", 1),
                CartItem("i2", "c1", "2", 3),
            ],
        )
        assert cart.find_item("2").id == "i2"
        assert cart.find_item("3") is None
        assert cart.item_count == 4

    def test_new_cart_is_empty(self):
        assert Cart(id="c1", user_id="u1").is_empty

    def test_add_item_merges_same_product(self):
        cart = Cart(id="c1", user_id="u1")
        first = cart.add_item("i1", "1", Quantity(2))
        again = cart.add_item("i2", "1", Quantity(2))

        assert again is first
        assert again.id == "i1"
        assert again.quantity == 4
        assert len(cart.items) == 1

    def test_add_item_opens_line_for_new_product(self):
        cart = Cart(id="c1", user_id="u1")
        cart.add_item("i1", "1", Quantity(1))
        line = cart.add_item("i2", "2", Quantity(3))

        assert line.cart_id == "c1"
        assert [i.id for i in cart.items] == ["i1", "i2"]
        assert cart.item_count == 4

    def test_get_line_by_item_id(self):
        cart = Cart(id="c1", user_id="u1")
        cart.add_item("i1", "1", Quantity(1))
        assert cart.get_line("i1").product_id == "1"
        assert cart.get_line("nope") is None


class TestNormalizeProductId:

    def test_int_becomes_string(self):
        assert normalize_product_id(12) == "12"

    def test_whitespace_trimmed(self):
        assert normalize_product_id(" 7 ") == "7"

    @pytest.mark.parametrize("raw", [None, "", "   ", True])
    def test_missing_rejected(self, raw):
        with pytest.raises(ValidationError, match="Product ID is required"):
            normalize_product_id(raw)
