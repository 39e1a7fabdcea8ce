"""Randomised item selection used for outfit generation and try-on suggestions."""

from __future__ import annotations

import random
from typing import Iterable, Protocol, Sequence, TypeVar

from pocket_wardrobe.models import Category, ClothingItem

T = TypeVar("T")

OUTFIT_CATEGORIES: tuple[Category, ...] = (
    Category.TOPS,
    Category.BOTTOMS,
    Category.OUTERWEAR,
    Category.SHOES,
)


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the policy relies on."""

    def choice(self, seq: Sequence[T]) -> T: ...


class ItemSource(Protocol):
    def filter_by_category(self, category_id: Category | str) -> list[ClothingItem]: ...


def representative_items(
    categories: Iterable[Category],
    catalog: ItemSource,
    rng: RandomSource,
) -> list[tuple[Category, ClothingItem]]:
    """Pick one item per non-empty category, in the given category order."""

    picked: list[tuple[Category, ClothingItem]] = []
    for category in categories:
        candidates = catalog.filter_by_category(category)
        if candidates:
            picked.append((category, rng.choice(candidates)))
    return picked


def random_one_from_each_category(
    categories: Iterable[Category],
    catalog: ItemSource,
    rng: RandomSource | None = None,
) -> list[str]:
    """Return one random item id per category; empty categories are skipped."""

    source = rng if rng is not None else random.Random()
    return [item.id for _, item in representative_items(categories, catalog, source)]
