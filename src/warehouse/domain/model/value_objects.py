"""Quantity bounds shared by every item category.

Stock levels are stored as 32-bit signed integers: anything above
MAX_QUANTITY cannot be represented and is rejected before it reaches
a repository.
"""

from __future__ import annotations

from warehouse.domain.exceptions import InvalidQuantityError, QuantityOverflowError

MAX_QUANTITY = 2**31 - 1


def validate_quantity(quantity: int) -> int:
    """Return ``quantity`` unchanged if it is a storable stock level.

    Raises InvalidQuantityError for negative values, values above
    MAX_QUANTITY and non-integers (``bool`` included).
    """
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise InvalidQuantityError(
            quantity,
            f"Quantity must be an integer, got {type(quantity).__name__}",
        )
    if quantity < 0:
        raise InvalidQuantityError(quantity)
    if quantity > MAX_QUANTITY:
        raise InvalidQuantityError(
            quantity, f"Quantity {quantity} exceeds the maximum of {MAX_QUANTITY}."
        )
    return quantity


def checked_add(current: int, delta: int) -> int:
    """Add ``delta`` to ``current``, refusing results above MAX_QUANTITY.

    A negative result is returned as-is; rejecting it is left to
    ``validate_quantity`` so the caller sees InvalidQuantityError.
    """
    total = current + delta
    if total > MAX_QUANTITY:
        raise QuantityOverflowError(current, delta, MAX_QUANTITY)
    return total
