"""Abstract repository for inventory items of a single category.

Defined in the domain layer so the domain never depends on
infrastructure. A repository is parameterised by its item type, so an
``InventoryRepository[ElectronicItem]`` can never receive a GroceryItem
as far as a type checker is concerned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from warehouse.domain.model.item import InventoryItem

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(ABC, Generic[T]):

    @abstractmethod
    def add_item(self, item: T) -> None:
        """Store a new item.

        Raises DuplicateItemError if the ID is already taken; the stored
        item is left untouched.
        """

    @abstractmethod
    def get_item_by_id(self, item_id: int) -> T:
        """Return the stored item itself (not a copy).

        Raises ItemNotFoundError if absent.
        """

    @abstractmethod
    def remove_item(self, item_id: int) -> None:
        """Delete an item. Raises ItemNotFoundError if absent."""

    @abstractmethod
    def get_all_items(self) -> list[T]:
        """Return a snapshot of every item, unaffected by later changes."""

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set an item's stock level.

        Raises InvalidQuantityError for a negative or unrepresentable
        quantity (checked first), then ItemNotFoundError if absent.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored items."""

    @abstractmethod
    def __contains__(self, item_id: object) -> bool:
        """Whether an item is stored under ``item_id``."""
