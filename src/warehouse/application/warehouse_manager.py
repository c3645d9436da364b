"""Warehouse manager: category-agnostic stock operations.

The manager owns one repository per item category and is the boundary
where domain errors stop. Every public operation returns an
OperationResult instead of raising, so a bad request never aborts the
caller. Errors that are not DomainExceptions are not ours to interpret
and propagate unchanged.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta

from warehouse.application.dto import OperationResult
from warehouse.domain.exceptions import DomainException
from warehouse.domain.model.item import ElectronicItem, GroceryItem, StockEntry
from warehouse.domain.model.value_objects import checked_add
from warehouse.domain.repository.inventory_repository import InventoryRepository, T

logger = logging.getLogger(__name__)


class WarehouseManager:

    def __init__(
        self,
        electronics: InventoryRepository[ElectronicItem],
        groceries: InventoryRepository[GroceryItem],
        stock_log: InventoryRepository[StockEntry],
    ) -> None:
        self._electronics = electronics
        self._groceries = groceries
        self._stock_log = stock_log

    @property
    def electronics(self) -> InventoryRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> InventoryRepository[GroceryItem]:
        return self._groceries

    @property
    def stock_log(self) -> InventoryRepository[StockEntry]:
        return self._stock_log

    # --- Seeding --------------------------------------------------------------

    def seed_data(self, now: datetime | None = None) -> None:
        """Load the sample catalogue and stock log.

        Seed IDs are fixed, so a DuplicateItemError here means the
        repositories were not empty; it is raised, not reported.
        """
        now = now or datetime.now()
        today = now.date()
        self._electronics.add_item(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        self._electronics.add_item(ElectronicItem(2, "Phone", 25, "Samsung", 12))
        self._groceries.add_item(
            GroceryItem(1, "Rice (5kg)", 40, _add_months(today, 12))
        )
        self._groceries.add_item(GroceryItem(2, "Milk", 15, today + timedelta(days=20)))
        self._stock_log.add_item(StockEntry(1, "Stapler", 12, now))
        self._stock_log.add_item(StockEntry(2, "Printer Paper A4", 500, now))
        self._stock_log.add_item(StockEntry(3, "Marker Pen", 48, now))
        self._stock_log.add_item(StockEntry(4, "USB Flash 32GB", 20, now))
        logger.info(
            "Seeded %d electronics, %d groceries and %d stock log entries",
            len(self._electronics),
            len(self._groceries),
            len(self._stock_log),
        )

    # --- Queries --------------------------------------------------------------

    def print_all_items(self, repo: InventoryRepository[T]) -> list[str]:
        """Return one display line per item."""
        return [str(item) for item in repo.get_all_items()]

    # --- Commands -------------------------------------------------------------

    def add_item(self, repo: InventoryRepository[T], item: T) -> OperationResult:
        try:
            repo.add_item(item)
        except DomainException as exc:
            return self._report("AddItem", exc)
        return OperationResult.success(f"Added item #{item.id}")

    def update_quantity(
        self, repo: InventoryRepository[T], item_id: int, quantity: int
    ) -> OperationResult:
        try:
            repo.update_quantity(item_id, quantity)
        except DomainException as exc:
            return self._report("UpdateQuantity", exc)
        return OperationResult.success(f"Quantity for #{item_id} set to {quantity}")

    def increase_stock(
        self, repo: InventoryRepository[T], item_id: int, delta: int
    ) -> OperationResult:
        """Add ``delta`` units to an item's stock.

        The new level is computed and checked before the repository is
        touched, so a failure leaves the stored quantity as it was.
        """
        try:
            current = repo.get_item_by_id(item_id).quantity
            new_quantity = checked_add(current, delta)
            repo.update_quantity(item_id, new_quantity)
        except DomainException as exc:
            return self._report("IncreaseStock", exc)
        return OperationResult.success(
            f"Stock updated for #{item_id}: {current} -> {new_quantity}"
        )

    def remove_item_by_id(
        self, repo: InventoryRepository[T], item_id: int
    ) -> OperationResult:
        try:
            repo.remove_item(item_id)
        except DomainException as exc:
            return self._report("RemoveItem", exc)
        return OperationResult.success(f"Removed item #{item_id}")

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _report(operation: str, exc: DomainException) -> OperationResult:
        result = OperationResult.failure(operation, exc)
        logger.warning(result.message)
        return result


def _add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the end of shorter months."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
