"""Inventory items.

Every category is its own class. They share no base class; what makes
them storable is that each one satisfies the InventoryItem protocol
(a read-only integer ``id`` and ``name`` plus a writable ``quantity``).

``quantity`` is the only attribute that can be assigned after
construction. Everything else sits behind read-only properties, so an
item held by a repository can never drift away from the key it is
stored under.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol

from warehouse.domain.exceptions import InvalidItemError
from warehouse.domain.model.value_objects import validate_quantity


class InventoryItem(Protocol):
    """Capabilities a repository relies on.

    ``quantity`` is writable, but only repositories should write it,
    through ``update_quantity``.
    """

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    quantity: int


def _validate_identity(item_id: int, name: str) -> None:
    if not isinstance(item_id, int) or isinstance(item_id, bool):
        raise InvalidItemError(
            f"Item ID must be an integer, got {type(item_id).__name__}"
        )
    if not isinstance(name, str) or not name.strip():
        raise InvalidItemError("Item name is required")


class ElectronicItem:

    def __init__(
        self, id: int, name: str, quantity: int, brand: str, warranty_months: int
    ) -> None:
        _validate_identity(id, name)
        validate_quantity(quantity)
        if not isinstance(brand, str) or not brand.strip():
            raise InvalidItemError("Brand is required")
        if not isinstance(warranty_months, int) or isinstance(warranty_months, bool):
            raise InvalidItemError(
                f"Warranty length must be an integer, "
                f"got {type(warranty_months).__name__}"
            )
        if warranty_months < 0:
            raise InvalidItemError("Warranty length cannot be negative")

        self._id = id
        self._name = name
        self._brand = brand
        self._warranty_months = warranty_months
        self.quantity = quantity

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElectronicItem):
            return NotImplemented
        return (self.id, self.name, self.quantity, self.brand, self.warranty_months) == (
            other.id, other.name, other.quantity, other.brand, other.warranty_months
        )

    def __repr__(self) -> str:
        return (
            f"ElectronicItem(id={self.id!r}, name={self.name!r}, "
            f"quantity={self.quantity!r}, brand={self.brand!r}, "
            f"warranty_months={self.warranty_months!r})"
        )

    def __str__(self) -> str:
        return (
            f"[Electronic] #{self.id} {self.name} ({self.brand}) "
            f"Qty={self.quantity}, Warranty={self.warranty_months}m"
        )


class GroceryItem:

    def __init__(self, id: int, name: str, quantity: int, expiry_date: date) -> None:
        _validate_identity(id, name)
        validate_quantity(quantity)
        if not isinstance(expiry_date, date):
            raise InvalidItemError(
                f"Expiry date must be a date, got {type(expiry_date).__name__}"
            )

        self._id = id
        self._name = name
        self._expiry_date = expiry_date
        self.quantity = quantity

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def expiry_date(self) -> date:
        return self._expiry_date

    def is_expired(self, today: date | None = None) -> bool:
        return self.expiry_date < (today or date.today())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroceryItem):
            return NotImplemented
        return (self.id, self.name, self.quantity, self.expiry_date) == (
            other.id, other.name, other.quantity, other.expiry_date
        )

    def __repr__(self) -> str:
        return (
            f"GroceryItem(id={self.id!r}, name={self.name!r}, "
            f"quantity={self.quantity!r}, expiry_date={self.expiry_date!r})"
        )

    def __str__(self) -> str:
        return (
            f"[Grocery]   #{self.id} {self.name} "
            f"Qty={self.quantity}, Expires={self.expiry_date:%Y-%m-%d}"
        )


class StockEntry:
    """A logged stock record: what arrived, how many, and when."""

    def __init__(self, id: int, name: str, quantity: int, date_added: datetime) -> None:
        _validate_identity(id, name)
        validate_quantity(quantity)
        if not isinstance(date_added, datetime):
            raise InvalidItemError(
                f"Date added must be a datetime, got {type(date_added).__name__}"
            )

        self._id = id
        self._name = name
        self._date_added = date_added
        self.quantity = quantity

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def date_added(self) -> datetime:
        return self._date_added

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StockEntry):
            return NotImplemented
        return (self.id, self.name, self.quantity, self.date_added) == (
            other.id, other.name, other.quantity, other.date_added
        )

    def __repr__(self) -> str:
        return (
            f"StockEntry(id={self.id!r}, name={self.name!r}, "
            f"quantity={self.quantity!r}, date_added={self.date_added!r})"
        )

    def __str__(self) -> str:
        return (
            f"#{self.id} {self.name} "
            f"Qty={self.quantity}, Added={self.date_added:%Y-%m-%d %H:%M:%S}"
        )
