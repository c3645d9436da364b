"""JSON-file snapshot store for a single item category.

The store never owns items. ``save`` serialises a repository snapshot and
``load`` pushes records back through ``add_item``, so reloaded data obeys
the same uniqueness rule as any other insert.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Generic

from warehouse.domain.repository.inventory_repository import InventoryRepository, T

logger = logging.getLogger(__name__)


class JsonItemStore(Generic[T]):

    def __init__(
        self,
        file_path: Path,
        to_raw: Callable[[T], dict],
        to_domain: Callable[[dict], T],
    ) -> None:
        self._file_path = file_path
        self._to_raw = to_raw
        self._to_domain = to_domain

    @property
    def file_path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def save(self, repo: InventoryRepository[T]) -> int:
        """Write every item in ``repo`` to the file, replacing its contents."""
        records = [self._to_raw(item) for item in repo.get_all_items()]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
        logger.info("Saved %d items to %s", len(records), self._file_path)
        return len(records)

    def load(self, repo: InventoryRepository[T]) -> int:
        """Add every stored record to ``repo``.

        A missing file loads nothing. Duplicate IDs raise
        DuplicateItemError; malformed records raise whatever decoding
        raised (KeyError, ValueError).
        """
        if not self.exists():
            logger.info("No file to load at %s", self._file_path)
            return 0

        records = json.loads(self._file_path.read_text(encoding="utf-8"))
        for raw in records:
            repo.add_item(self._to_domain(raw))
        logger.info("Loaded %d items from %s", len(records), self._file_path)
        return len(records)
