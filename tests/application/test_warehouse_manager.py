"""Integration tests for the WarehouseManager."""

import logging
from datetime import date, datetime

import pytest

from warehouse.domain.exceptions import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
    QuantityOverflowError,
)
from warehouse.domain.model.value_objects import MAX_QUANTITY
from tests.factories import NOW, empty_manager, laptop, seeded_manager


class TestSeedData:

    def test_seeds_every_category(self):
        manager = seeded_manager()
        assert len(manager.electronics) == 2
        assert len(manager.groceries) == 2
        assert len(manager.stock_log) == 4
        assert manager.electronics.get_item_by_id(2).brand == "Samsung"

    def test_stock_log_stamped_with_seed_time(self):
        manager = seeded_manager()
        entries = {e.id: e for e in manager.stock_log.get_all_items()}
        assert entries[2].name == "Printer Paper A4"
        assert entries[2].quantity == 500
        assert {e.date_added for e in entries.values()} == {NOW}

    def test_grocery_expiry_relative_to_today(self):
        manager = seeded_manager()
        assert manager.groceries.get_item_by_id(1).expiry_date == date(2027, 10, 19)
        assert manager.groceries.get_item_by_id(2).expiry_date == date(2026, 11, 8)

    def test_month_shift_clamps_to_month_end(self):
        manager = empty_manager()
        manager.seed_data(now=datetime(2028, 2, 29, 12, 0))
        assert manager.groceries.get_item_by_id(1).expiry_date == date(2029, 2, 28)

    def test_seeding_twice_raises(self):
        manager = seeded_manager()
        with pytest.raises(DuplicateItemError):
            manager.seed_data(now=NOW)


class TestPrintAllItems:

    def test_one_line_per_item(self):
        manager = seeded_manager()
        lines = manager.print_all_items(manager.electronics)
        assert sorted(lines) == [
            "[Electronic] #1 Laptop (Dell) Qty=10, Warranty=24m",
            "[Electronic] #2 Phone (Samsung) Qty=25, Warranty=12m",
        ]

    def test_empty_repository(self):
        manager = empty_manager()
        assert manager.print_all_items(manager.groceries) == []


class TestIncreaseStock:

    def test_increase_then_missing_id(self):
        manager = seeded_manager()

        result = manager.increase_stock(manager.electronics, 2, 10)
        assert result.ok
        assert result.message == "Stock updated for #2: 25 -> 35"
        assert manager.electronics.get_item_by_id(2).quantity == 35

        result = manager.increase_stock(manager.electronics, 999, 10)
        assert not result.ok
        assert isinstance(result.error, ItemNotFoundError)
        assert result.message == "IncreaseStock error: Item with ID 999 not found."
        assert manager.electronics.get_item_by_id(2).quantity == 35

    def test_same_logic_for_groceries(self):
        manager = seeded_manager()
        result = manager.increase_stock(manager.groceries, 2, 10)
        assert result.ok
        assert manager.groceries.get_item_by_id(2).quantity == 25

    def test_same_logic_for_stock_log(self):
        manager = seeded_manager()
        result = manager.increase_stock(manager.stock_log, 3, 2)
        assert result.message == "Stock updated for #3: 48 -> 50"
        assert manager.stock_log.get_item_by_id(3).quantity == 50

    def test_overflow_reported_without_change(self):
        manager = seeded_manager()
        manager.electronics.update_quantity(1, MAX_QUANTITY - 1)

        result = manager.increase_stock(manager.electronics, 1, 2)

        assert not result.ok
        assert isinstance(result.error, QuantityOverflowError)
        assert manager.electronics.get_item_by_id(1).quantity == MAX_QUANTITY - 1

    def test_increase_up_to_maximum(self):
        manager = seeded_manager()
        manager.electronics.update_quantity(1, MAX_QUANTITY - 1)
        assert manager.increase_stock(manager.electronics, 1, 1).ok
        assert manager.electronics.get_item_by_id(1).quantity == MAX_QUANTITY

    def test_negative_result_reported_as_invalid_quantity(self):
        manager = seeded_manager()
        result = manager.increase_stock(manager.electronics, 1, -11)
        assert not result.ok
        assert isinstance(result.error, InvalidQuantityError)
        assert manager.electronics.get_item_by_id(1).quantity == 10

    def test_failure_logged_as_warning(self, caplog):
        manager = seeded_manager()
        with caplog.at_level(logging.WARNING):
            manager.increase_stock(manager.electronics, 999, 1)
        assert "IncreaseStock error: Item with ID 999 not found." in caplog.text


class TestRemoveItemById:

    def test_remove(self):
        manager = seeded_manager()
        result = manager.remove_item_by_id(manager.groceries, 2)
        assert result.ok
        assert result.message == "Removed item #2"
        assert 2 not in manager.groceries

    def test_remove_missing_reported(self):
        manager = seeded_manager()
        result = manager.remove_item_by_id(manager.groceries, 999)
        assert not result.ok
        assert result.message == "RemoveItem error: Item with ID 999 not found."
        assert len(manager.groceries) == 2


class TestReportedMutations:

    def test_duplicate_add_reported(self):
        manager = seeded_manager()
        result = manager.add_item(
            manager.electronics,
            laptop(name="Tablet", quantity=5, brand="Apple", warranty_months=12),
        )
        assert not result.ok
        assert isinstance(result.error, DuplicateItemError)
        assert manager.electronics.get_item_by_id(1).name == "Laptop"

    def test_add_reported(self):
        manager = seeded_manager()
        result = manager.add_item(manager.electronics, laptop(id=3, name="Tablet"))
        assert result.ok
        assert result.message == "Added item #3"

    def test_negative_update_reported(self):
        manager = seeded_manager()
        result = manager.update_quantity(manager.electronics, 2, -5)
        assert not result.ok
        assert result.message == "UpdateQuantity error: Quantity cannot be negative."
        assert manager.electronics.get_item_by_id(2).quantity == 25

    def test_update_reported(self):
        manager = seeded_manager()
        result = manager.update_quantity(manager.electronics, 2, 7)
        assert result.ok
        assert manager.electronics.get_item_by_id(2).quantity == 7

    def test_unexpected_errors_propagate(self):
        manager = seeded_manager()
        with pytest.raises(TypeError):
            manager.increase_stock(manager.electronics, 1, "ten")
