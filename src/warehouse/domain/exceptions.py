"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
manager and the CLI can catch them uniformly and report a readable message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidItemError(ValidationError):
    """An item was built with malformed attributes."""


class DuplicateItemError(ValidationError):
    """An item with the same ID is already stored."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(EntityNotFoundError):
    """No item is stored under the requested ID."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


class InvalidQuantityError(ValidationError):
    """A quantity is negative or outside the representable range."""

    def __init__(self, quantity: int, message: str | None = None) -> None:
        super().__init__(message or "Quantity cannot be negative.")
        self.quantity = quantity


class QuantityOverflowError(ValidationError):
    """A stock increase would exceed the largest representable quantity."""

    def __init__(self, current: int, delta: int, limit: int) -> None:
        super().__init__(
            f"Increasing quantity {current} by {delta} "
            f"would exceed the maximum of {limit}."
        )
        self.current = current
        self.delta = delta
        self.limit = limit
