"""Dict-backed implementation of InventoryRepository."""

from __future__ import annotations

import copy
import logging

from warehouse.domain.exceptions import DuplicateItemError, ItemNotFoundError
from warehouse.domain.model.value_objects import validate_quantity
from warehouse.domain.repository.inventory_repository import InventoryRepository, T

logger = logging.getLogger(__name__)


class InMemoryInventoryRepository(InventoryRepository[T]):

    def __init__(self, items: list[T] | None = None) -> None:
        self._store: dict[int, T] = {}
        for item in items or []:
            self.add_item(item)

    # --- InventoryRepository interface ----------------------------------------

    def add_item(self, item: T) -> None:
        if item.id in self._store:
            raise DuplicateItemError(item.id)
        self._store[item.id] = item
        logger.debug("Added item #%s (%s)", item.id, item.name)

    def get_item_by_id(self, item_id: int) -> T:
        try:
            return self._store[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove_item(self, item_id: int) -> None:
        if self._store.pop(item_id, None) is None:
            raise ItemNotFoundError(item_id)
        logger.debug("Removed item #%s", item_id)

    def get_all_items(self) -> list[T]:
        # Shallow copies: a later update_quantity must not reach into
        # a list that was already handed out.
        return [copy.copy(item) for item in self._store.values()]

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        validate_quantity(new_quantity)
        item = self.get_item_by_id(item_id)
        item.quantity = new_quantity
        logger.debug("Item #%s quantity set to %s", item_id, new_quantity)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._store
