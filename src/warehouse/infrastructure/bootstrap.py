"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from warehouse.application.warehouse_manager import WarehouseManager
from warehouse.domain.model.item import ElectronicItem, GroceryItem, StockEntry
from warehouse.infrastructure.persistence.codecs import (
    electronic_to_domain,
    electronic_to_raw,
    grocery_to_domain,
    grocery_to_raw,
    stock_entry_to_domain,
    stock_entry_to_raw,
)
from warehouse.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)
from warehouse.infrastructure.persistence.json_item_store import JsonItemStore

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def electronics_store(data_dir: Path = DATA_DIR) -> JsonItemStore[ElectronicItem]:
    return JsonItemStore(
        data_dir / "electronics.json", electronic_to_raw, electronic_to_domain
    )


def groceries_store(data_dir: Path = DATA_DIR) -> JsonItemStore[GroceryItem]:
    return JsonItemStore(data_dir / "groceries.json", grocery_to_raw, grocery_to_domain)


def stock_log_store(data_dir: Path = DATA_DIR) -> JsonItemStore[StockEntry]:
    return JsonItemStore(
        data_dir / "stock_log.json", stock_entry_to_raw, stock_entry_to_domain
    )


def warehouse_manager() -> WarehouseManager:
    """A manager over empty in-memory repositories."""
    return WarehouseManager(
        electronics=InMemoryInventoryRepository[ElectronicItem](),
        groceries=InMemoryInventoryRepository[GroceryItem](),
        stock_log=InMemoryInventoryRepository[StockEntry](),
    )


def load_warehouse(data_dir: Path = DATA_DIR) -> WarehouseManager:
    """Build a manager from the data files, seeding sample data on first use."""
    manager = warehouse_manager()
    electronics = electronics_store(data_dir)
    groceries = groceries_store(data_dir)
    stock_log = stock_log_store(data_dir)

    if not (electronics.exists() or groceries.exists() or stock_log.exists()):
        manager.seed_data()
        return manager

    electronics.load(manager.electronics)
    groceries.load(manager.groceries)
    stock_log.load(manager.stock_log)
    return manager


def save_warehouse(manager: WarehouseManager, data_dir: Path = DATA_DIR) -> None:
    electronics_store(data_dir).save(manager.electronics)
    groceries_store(data_dir).save(manager.groceries)
    stock_log_store(data_dir).save(manager.stock_log)
