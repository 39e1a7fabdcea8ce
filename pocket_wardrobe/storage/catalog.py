"""In-memory collection of the user's clothing items."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from pocket_wardrobe.models import Category, ClothingItem, DuplicateIdError

logger = logging.getLogger(__name__)


class Catalog:
    """Owns clothing items, keeping insertion order and unique ids."""

    def __init__(self, items: Iterable[ClothingItem] = ()) -> None:
        self._items: dict[str, ClothingItem] = {}
        for item in items:
            self.add(item)

    def list(self) -> list[ClothingItem]:
        """Return items in insertion order."""

        return list(self._items.values())

    def filter_by_category(self, category_id: Category | str) -> list[ClothingItem]:
        """Return items of one category, preserving catalog order."""

        return [item for item in self._items.values() if item.category == category_id]

    def add(self, item: ClothingItem) -> None:
        if item.id in self._items:
            raise DuplicateIdError("Clothing item", item.id)
        self._items[item.id] = item

    def remove(self, item_id: str) -> None:
        """Delete an item; unknown ids are ignored."""

        if self._items.pop(item_id, None) is None:
            logger.debug("Ignoring removal of unknown clothing item %s", item_id)

    def get(self, item_id: str) -> ClothingItem | None:
        return self._items.get(item_id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[ClothingItem]:
        return iter(self.list())
