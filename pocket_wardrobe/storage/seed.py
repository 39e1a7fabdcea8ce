"""Bulk initial load of clothing items and outfits."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from pocket_wardrobe.models import ClothingItem, Outfit

logger = logging.getLogger(__name__)

SAMPLE_DATA: dict[str, list[dict[str, Any]]] = {
    "items": [
        {
            "id": "item-1",
            "name": "Blue T-Shirt",
            "category": "tops",
            "image_url": "https://via.placeholder.com/150x150?text=Blue+Tshirt",
        },
        {
            "id": "item-2",
            "name": "Black Jeans",
            "category": "bottoms",
            "image_url": "https://via.placeholder.com/150x150?text=Black+Jeans",
        },
        {
            "id": "item-3",
            "name": "Leather Jacket",
            "category": "outerwear",
            "image_url": "https://via.placeholder.com/150x150?text=Leather+Jacket",
        },
        {
            "id": "item-4",
            "name": "Sneakers",
            "category": "shoes",
            "image_url": "https://via.placeholder.com/150x150?text=Sneakers",
        },
        {
            "id": "item-5",
            "name": "Sunglasses",
            "category": "accessories",
            "image_url": "https://via.placeholder.com/150x150?text=Sunglasses",
        },
    ],
    "outfits": [
        {
            "id": "outfit-1",
            "name": "Casual Day Out",
            "description": "Perfect for a relaxed day around town",
            "items": ["item-1", "item-2", "item-4"],
            "created": "2025-04-01T12:00:00Z",
        },
    ],
}


@dataclass(slots=True)
class SeedData:
    """Parsed initial wardrobe contents."""

    items: list[ClothingItem]
    outfits: list[Outfit]

    @classmethod
    def empty(cls) -> "SeedData":
        return cls(items=[], outfits=[])


def parse_seed(payload: Mapping[str, Any]) -> SeedData:
    """Convert a JSON-like mapping into domain objects."""

    items = [ClothingItem.from_mapping(entry) for entry in payload.get("items") or []]
    outfits = [Outfit.from_mapping(entry) for entry in payload.get("outfits") or []]
    return SeedData(items=items, outfits=outfits)


def load_seed(path: Path | None, *, use_sample: bool = True) -> SeedData:
    """Read seed data from ``path`` or fall back to the built-in sample."""

    if path is not None:
        logger.info("Loading wardrobe seed from %s", path)
        payload = json.loads(path.read_text(encoding="utf-8"))
        return parse_seed(payload)
    if use_sample:
        return parse_seed(SAMPLE_DATA)
    return SeedData.empty()
