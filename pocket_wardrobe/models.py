"""Domain objects shared by the catalog, outfit store and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

UNNAMED_ITEM = "Unnamed item"
UNKNOWN_CATEGORY = "Unknown"


class DuplicateIdError(ValueError):
    """Raised when an id is inserted twice into the catalog or outfit store."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} with id {identifier!r} already exists.")


class Category(str, Enum):
    """Fixed clothing taxonomy; declaration order is the display order."""

    TOPS = "tops"
    BOTTOMS = "bottoms"
    OUTERWEAR = "outerwear"
    SHOES = "shoes"
    ACCESSORIES = "accessories"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def category_name(category_id: str) -> str:
    """Return the display name for a category id, or ``Unknown``."""

    try:
        return Category(category_id).display_name
    except ValueError:
        return UNKNOWN_CATEGORY


@dataclass(slots=True, frozen=True)
class ClothingItem:
    """A single garment from the user's wardrobe."""

    id: str
    category: Category
    image_url: str
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or UNNAMED_ITEM

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ClothingItem":
        """Build an item from seed data or an upload result."""

        identifier = payload.get("id")
        if not identifier:
            raise ValueError("Clothing item payload has no id.")
        raw_category = payload.get("category") or ""
        try:
            category = Category(str(raw_category).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported category {raw_category!r} for item {identifier!r}.") from exc
        return cls(
            id=str(identifier),
            category=category,
            image_url=str(payload.get("image_url") or payload.get("imageUrl") or ""),
            name=payload.get("name") or None,
        )


@dataclass(slots=True, frozen=True)
class Outfit:
    """A composition referencing catalog items by id."""

    id: str
    items: tuple[str, ...] = ()
    name: str | None = None
    description: str | None = None
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def title(self) -> str:
        return self.name or f"Outfit {self.id}"

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Outfit":
        identifier = payload.get("id")
        if not identifier:
            raise ValueError("Outfit payload has no id.")
        created_raw = payload.get("created")
        created = (
            datetime.fromisoformat(str(created_raw).replace("Z", "+00:00"))
            if created_raw
            else datetime.now(timezone.utc)
        )
        items = payload.get("items") or ()
        if not isinstance(items, (list, tuple)):
            raise ValueError(f"Outfit {identifier} items must be a list of ids.")
        return cls(
            id=str(identifier),
            items=tuple(str(item_id) for item_id in items),
            name=payload.get("name") or None,
            description=payload.get("description") or None,
            created=created,
        )
