"""In-memory store of generated outfits, newest first."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from pocket_wardrobe.models import DuplicateIdError, Outfit

logger = logging.getLogger(__name__)


class OutfitStore:
    """Owns outfits; items are referenced by id only.

    ``max_outfits`` bounds the store size. ``None`` keeps every outfit,
    otherwise the oldest entries are evicted once the bound is exceeded.
    """

    def __init__(self, outfits: Iterable[Outfit] = (), *, max_outfits: int | None = None) -> None:
        if max_outfits is not None and max_outfits < 1:
            raise ValueError("max_outfits must be positive or None.")
        self._max_outfits = max_outfits
        self._outfits: list[Outfit] = []
        # Seed data is listed newest first, so insert oldest first.
        for outfit in reversed(list(outfits)):
            self.add(outfit)

    @property
    def max_outfits(self) -> int | None:
        return self._max_outfits

    def list(self) -> list[Outfit]:
        """Return outfits, most recently created first."""

        return list(self._outfits)

    def add(self, outfit: Outfit) -> None:
        if any(existing.id == outfit.id for existing in self._outfits):
            raise DuplicateIdError("Outfit", outfit.id)
        self._outfits.insert(0, outfit)
        if self._max_outfits is not None and len(self._outfits) > self._max_outfits:
            evicted = self._outfits[self._max_outfits:]
            del self._outfits[self._max_outfits:]
            logger.info("Evicted %d outfit(s) over the limit of %d", len(evicted), self._max_outfits)

    def get(self, outfit_id: str) -> Outfit | None:
        for outfit in self._outfits:
            if outfit.id == outfit_id:
                return outfit
        return None

    def __len__(self) -> int:
        return len(self._outfits)

    def __iter__(self) -> Iterator[Outfit]:
        return iter(self.list())
