"""Tests for the outfit store ordering and bound."""

from __future__ import annotations

import pytest

from pocket_wardrobe.models import DuplicateIdError, Outfit
from pocket_wardrobe.storage import OutfitStore


def test_new_outfits_are_listed_first() -> None:
    store = OutfitStore()
    store.add(Outfit(id="a"))
    store.add(Outfit(id="b"))

    assert [outfit.id for outfit in store.list()] == ["b", "a"]


def test_seed_order_is_kept() -> None:
    store = OutfitStore([Outfit(id="newest"), Outfit(id="older")])

    assert [outfit.id for outfit in store.list()] == ["newest", "older"]


def test_duplicate_outfit_id_raises() -> None:
    store = OutfitStore([Outfit(id="a")])

    with pytest.raises(DuplicateIdError):
        store.add(Outfit(id="a"))
    assert len(store) == 1


def test_get_missing_returns_none() -> None:
    assert OutfitStore().get("nope") is None


def test_bounded_store_evicts_oldest() -> None:
    store = OutfitStore(max_outfits=2)
    for outfit_id in ("a", "b", "c"):
        store.add(Outfit(id=outfit_id))

    assert [outfit.id for outfit in store.list()] == ["c", "b"]
    assert store.get("a") is None


def test_invalid_bound_is_rejected() -> None:
    with pytest.raises(ValueError):
        OutfitStore(max_outfits=0)
