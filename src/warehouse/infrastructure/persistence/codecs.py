"""Plain-dict encodings of each item category for JSON storage."""

from __future__ import annotations

from datetime import date, datetime

from warehouse.domain.model.item import ElectronicItem, GroceryItem, StockEntry


def electronic_to_raw(item: ElectronicItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "brand": item.brand,
        "warranty_months": item.warranty_months,
    }


def electronic_to_domain(raw: dict) -> ElectronicItem:
    return ElectronicItem(
        id=raw["id"],
        name=raw["name"],
        quantity=raw["quantity"],
        brand=raw["brand"],
        warranty_months=raw.get("warranty_months", 0),
    )


def grocery_to_raw(item: GroceryItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "expiry_date": item.expiry_date.isoformat(),
    }


def grocery_to_domain(raw: dict) -> GroceryItem:
    return GroceryItem(
        id=raw["id"],
        name=raw["name"],
        quantity=raw["quantity"],
        expiry_date=date.fromisoformat(raw["expiry_date"]),
    )


def stock_entry_to_raw(entry: StockEntry) -> dict:
    return {
        "id": entry.id,
        "name": entry.name,
        "quantity": entry.quantity,
        "date_added": entry.date_added.isoformat(),
    }


def stock_entry_to_domain(raw: dict) -> StockEntry:
    return StockEntry(
        id=raw["id"],
        name=raw["name"],
        quantity=raw["quantity"],
        date_added=datetime.fromisoformat(raw["date_added"]),
    )
