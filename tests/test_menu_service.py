"""Grouping, price display and cart arithmetic."""
import itertools
from decimal import Decimal
from types import SimpleNamespace
import pytest
from dinehub.services.menu_service import (
    UNCATEGORIZED,
    Cart,
    badges,
    default_selection,
    display_price,
    format_amount,
    group_by_category,
    parse_price,
)


def _item(id, category=None, **flags):
    return SimpleNamespace(id=id, category=category, **flags)


class TestGroupByCategory:
    def test_partition_preserves_order(self):
        items = [_item(1, "Main"), _item(2, "Dessert"), _item(3, "Main"), _item(4, "Drink"), _item(5, "Dessert")]
        groups = group_by_category(items)
        assert list(groups) == ["Main", "Dessert", "Drink"]
        assert [i.id for i in groups["Main"]] == [1, 3]
        assert [i.id for i in groups["Dessert"]] == [2, 5]
        flattened = sorted(i.id for bucket in groups.values() for i in bucket)
        assert flattened == [1, 2, 3, 4, 5]

    def test_missing_category_goes_to_uncategorized(self):
        items = [_item(1, None), _item(2, ""), _item(3, "   "), _item(4, "Main")]
        groups = group_by_category(items)
        assert list(groups) == [UNCATEGORIZED, "Main"]
        assert [i.id for i in groups[UNCATEGORIZED]] == [1, 2, 3]

    def test_empty(self):
        assert group_by_category([]) == {}


class TestPrices:
    @pytest.mark.parametrize("stored,shown", [
        ("6.00", "$6.00"),
        ("$12.50", "$12.50"),
        ("12.5", "$12.5"),
        ("1,250", "$1,250"),
    ])
    def test_display_price_only_adds_missing_symbol(self, stored, shown):
        assert display_price(stored) == shown

    @pytest.mark.parametrize("text,value", [
        ("$12.50", 12.50),
        ("free", 0.0),
        ("10", 10.0),
        ("", 0.0),
        (None, 0.0),
        (".", 0.0),
        ("USD 7.25 each", 7.25),
        ("1.2.3", 1.2),
        ("$1,250.00", 1250.0),
    ])
    def test_parse_price_is_total(self, text, value):
        assert parse_price(text) == value

    def test_format_amount(self):
        assert format_amount(Decimal("3")) == "3.00"


class TestCart:
    def test_add_new_item_starts_at_one(self):
        cart = Cart().add(1, "Soup", "6.00")
        assert len(cart) == 1
        assert cart.get(1).quantity == 1

    def test_add_existing_item_increments(self):
        cart = Cart().add(1, "Soup", "6.00").add(1, "Soup", "6.00")
        assert len(cart) == 1
        assert cart.get(1).quantity == 2

    def test_decrement_to_zero_removes_entry(self):
        cart = Cart().add(1, "Soup", "6.00").add(2, "Tea", "$2")
        cart = cart.change_quantity(1, -1)
        assert cart.get(1) is None
        assert [e.item_id for e in cart.entries] == [2]

    def test_large_negative_delta_removes_entry(self):
        cart = Cart().add(1, "Soup", "6.00").change_quantity(1, 3).change_quantity(1, -10)
        assert cart.get(1) is None
        assert cart.count == 0

    def test_change_quantity_of_absent_item_is_noop(self):
        cart = Cart().add(1, "Soup", "6.00")
        assert cart.change_quantity(99, 1) == cart

    def test_operations_do_not_mutate(self):
        empty = Cart()
        empty.add(1, "Soup", "6.00")
        assert len(empty) == 0

    def test_quantities_stay_positive(self):
        ops = [("add", 1), ("delta", 1, -1), ("add", 2), ("delta", 2, 2), ("add", 1), ("delta", 2, -1), ("delta", 1, -5)]
        cart = Cart()
        for op in ops:
            if op[0] == "add":
                cart = cart.add(op[1], f"item {op[1]}", "1.00")
            else:
                cart = cart.change_quantity(op[1], op[2])
            assert all(e.quantity >= 1 for e in cart.entries)

    def test_total_uses_lenient_price_parse(self):
        cart = (
            Cart()
            .add(1, "Soup", "$12.50")
            .add(2, "Water", "free")
            .add(3, "Pasta", "10")
            .change_quantity(3, 1)
        )
        assert cart.total() == Decimal("32.50")
        assert cart.total_display() == "32.50"
        assert cart.count == 4

    def test_total_is_order_independent(self):
        lines = [(1, "A", "0.10"), (2, "B", "$0.20"), (3, "C", "0.30"), (4, "D", "19.99")]
        totals = set()
        for perm in itertools.permutations(lines):
            cart = Cart()
            for item_id, name, price in perm:
                cart = cart.add(item_id, name, price)
            cart = cart.change_quantity(4, 2)
            totals.add(cart.total())
        assert totals == {Decimal("60.57")}

    def test_sub_cent_prices_round_once_at_the_end(self):
        cart = Cart().add(1, "Mint", "0.125").change_quantity(1, 1)
        assert cart.total() == Decimal("0.25")
        assert Cart().add(1, "Mint", "0.125").total_display() == "0.13"

    def test_empty_total(self):
        assert Cart().total_display() == "0.00"


class TestDisplayHelpers:
    def test_badges_are_independent(self):
        item = _item(1, is_bestseller=True, is_chefs_pick=True, is_todays_special=True)
        assert badges(item) == ["Bestseller", "Chef's Pick", "Today's Special"]
        assert badges(_item(2, is_chefs_pick=True)) == ["Chef's Pick"]
        assert badges(_item(3)) == []

    def test_default_selection_is_lowest_id(self):
        records = [_item(7), _item(3), _item(5)]
        assert default_selection(records).id == 3
        assert default_selection([]) is None
