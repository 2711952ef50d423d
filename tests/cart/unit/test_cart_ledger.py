"""
Unit Tests: CartLedger

Tests for services/cart.py covering:
- add() / increment() - stock ceiling and out-of-stock refusal
- decrement() / remove() - line removal at quantity 1
- remove_ordered() - only the ordered quantities leave the cart
- set_quantity() - clamping to [0, stock]
- Read models used by pricing and checkout
"""

import pytest

from exceptions.cart import CartItemNotFoundException
from services.cart import CartLedger


@pytest.fixture
def cart():
    return CartLedger()


class TestAdd:

    def test_add_new_line_starts_at_one(self, cart, make_book):
        book = make_book("1", price="200", stock=5)

        assert cart.add(book, catalog_stock=5) is True

        line = cart.get("1")
        assert line.quantity == 1
        assert line.stock == 5
        assert line.title == "Book 1"
        assert line.price == book.price

    def test_add_existing_line_increments(self, cart, make_book):
        book = make_book("1", stock=5)
        cart.add(book, 5)
        cart.add(book, 5)

        assert cart.get("1").quantity == 2
        assert len(cart) == 1

    def test_add_at_stock_ceiling_is_silent_noop(self, cart, make_book):
        book = make_book("1", stock=2)
        cart.add(book, 2)
        cart.add(book, 2)

        assert cart.add(book, 2) is False
        assert cart.get("1").quantity == 2

    def test_add_out_of_stock_book_is_refused(self, cart, make_book):
        book = make_book("1", stock=0)

        assert cart.add(book, 0) is False
        assert cart.is_empty

    def test_add_clamps_when_stock_shrank(self, cart, make_book):
        book = make_book("1", stock=5)
        for _ in range(4):
            cart.add(book, 5)

        assert cart.add(book, 2) is True
        assert cart.get("1").quantity == 2
        assert cart.get("1").stock == 2

    def test_add_removes_line_when_stock_dropped_to_zero(self, cart, make_book):
        book = make_book("1", stock=3)
        cart.add(book, 3)

        cart.add(book, 0)

        assert "1" not in cart

    def test_lines_keep_insertion_order(self, cart, make_book):
        for item_id in ("3", "1", "2"):
            cart.add(make_book(item_id), 5)

        assert [line.item_id for line in cart.items] == ["3", "1", "2"]


class TestIncrement:

    def test_increment_existing_line(self, cart, make_book):
        cart.add(make_book("1"), 5)

        assert cart.increment("1", 5) is True
        assert cart.get("1").quantity == 2

    def test_increment_missing_line_raises(self, cart):
        with pytest.raises(CartItemNotFoundException) as exc_info:
            cart.increment("missing", 5)

        assert exc_info.value.details['item_id'] == "missing"


class TestDecrementAndRemove:

    def test_decrement_lowers_quantity(self, cart, make_book):
        book = make_book("1")
        cart.add(book, 5)
        cart.add(book, 5)

        assert cart.decrement("1") is True
        assert cart.get("1").quantity == 1

    def test_decrement_at_one_removes_line(self, cart, make_book):
        cart.add(make_book("1"), 5)

        cart.decrement("1")

        assert cart.get("1") is None
        assert cart.is_empty

    def test_decrement_missing_line_is_noop(self, cart):
        assert cart.decrement("missing") is False

    def test_remove(self, cart, make_book):
        cart.add(make_book("1"), 5)
        cart.add(make_book("2"), 5)

        assert cart.remove("1") is True
        assert cart.remove("1") is False
        assert [line.item_id for line in cart.items] == ["2"]

    def test_clear(self, cart, make_book):
        cart.add(make_book("1"), 5)
        cart.add(make_book("2"), 5)

        cart.clear()

        assert cart.is_empty
        assert cart.total_quantity == 0

    def test_remove_ordered_keeps_later_additions(self, cart, make_book):
        first = make_book("1", stock=5)
        cart.add(first, 5)
        cart.add(make_book("2", stock=5), 5)
        ordered = cart.to_order_items()

        cart.add(first, 5)
        cart.add(make_book("3", stock=2), 2)
        cart.remove_ordered(ordered)

        assert [(line.item_id, line.quantity) for line in cart.items] == [("1", 1), ("3", 1)]

    def test_remove_ordered_ignores_lines_already_gone(self, cart, make_book):
        cart.add(make_book("1", stock=5), 5)
        ordered = cart.to_order_items()
        cart.remove("1")

        cart.remove_ordered(ordered)

        assert cart.is_empty


class TestSetQuantity:

    def test_set_quantity_within_stock(self, cart, make_book):
        cart.add(make_book("1"), 5)

        assert cart.set_quantity("1", 4) == 4
        assert cart.get("1").quantity == 4

    def test_set_quantity_clamps_to_recorded_stock(self, cart, make_book):
        cart.add(make_book("1"), 3)

        assert cart.set_quantity("1", 10) == 3
        assert cart.get("1").quantity == 3

    def test_set_quantity_uses_explicit_stock(self, cart, make_book):
        cart.add(make_book("1"), 3)

        assert cart.set_quantity("1", 10, stock=8) == 8
        assert cart.get("1").stock == 8

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_set_quantity_zero_or_negative_removes_line(self, cart, make_book, quantity):
        cart.add(make_book("1"), 3)

        assert cart.set_quantity("1", quantity) == 0
        assert "1" not in cart

    def test_set_quantity_missing_line_raises(self, cart):
        with pytest.raises(CartItemNotFoundException):
            cart.set_quantity("missing", 2)


class TestReadModels:

    def test_total_quantity_and_len(self, cart, make_book):
        first = make_book("1")
        cart.add(first, 5)
        cart.add(first, 5)
        cart.add(make_book("2"), 5)

        assert len(cart) == 2
        assert cart.total_quantity == 3

    def test_to_order_items(self, cart, make_book):
        first = make_book("1")
        cart.add(first, 5)
        cart.add(first, 5)
        cart.add(make_book("2"), 5)

        items = cart.to_order_items()

        assert [(item.id, item.quantity) for item in items] == [("1", 2), ("2", 1)]

    def test_quantities_stay_within_stock_over_mixed_operations(self, cart, make_book):
        book = make_book("1", stock=3)
        operations = [
            lambda: cart.add(book, 3),
            lambda: cart.add(book, 3),
            lambda: cart.add(book, 3),
            lambda: cart.add(book, 3),
            lambda: cart.decrement("1"),
            lambda: cart.set_quantity("1", 99),
            lambda: cart.add(book, 1),
        ]
        for operation in operations:
            operation()
            for line in cart.items:
                assert 1 <= line.quantity <= line.stock

        assert cart.get("1").quantity == 1
