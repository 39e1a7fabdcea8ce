"""Pure projection from wardrobe state to a displayable view description.

Every call builds the full tree for the active view; consumers replace
whatever they showed before. Descriptions are frozen dataclasses so two
renders of the same snapshot compare equal.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Union

from pocket_wardrobe.models import Category, ClothingItem, category_name
from pocket_wardrobe.selection import representative_items
from pocket_wardrobe.storage import Catalog, OutfitStore
from pocket_wardrobe.view_state import (
    OutfitsView,
    TryOnStage,
    TryOnView,
    View,
    ViewState,
    WardrobeView,
)

EMPTY_WARDROBE_TEXT = "Your wardrobe is empty! Tap the button below to add your first clothing item."
EMPTY_OUTFITS_TEXT = "No outfits generated yet! Tap the button below to create your first outfit."
NO_DESCRIPTION = "No description"
TRY_ON_TITLE = "Virtual Try-On"
TRY_ON_PROMPT = "Upload a photo of yourself or choose one from your gallery"
PREVIEW_HEADING = "Select clothing to try on"

MAIN_BUTTON_LABELS = {
    View.WARDROBE: "Upload New Item",
    View.OUTFITS: "Generate Outfits",
    View.VIRTUAL_TRY_ON: "Start Virtual Try-On",
}

ITEM_ACTIONS = ("edit", "remove", "try_on")


@dataclass(slots=True, frozen=True)
class CategorySection:
    category: Category
    title: str
    items: tuple[ClothingItem, ...]


@dataclass(slots=True, frozen=True)
class WardrobeDescription:
    sections: tuple[CategorySection, ...]
    empty: bool
    main_button: str = MAIN_BUTTON_LABELS[View.WARDROBE]
    empty_text: str = EMPTY_WARDROBE_TEXT


@dataclass(slots=True, frozen=True)
class OutfitCard:
    outfit_id: str
    title: str
    description: str
    collage: tuple[ClothingItem, ...]


@dataclass(slots=True, frozen=True)
class OutfitsDescription:
    cards: tuple[OutfitCard, ...]
    empty: bool
    main_button: str = MAIN_BUTTON_LABELS[View.OUTFITS]
    empty_text: str = EMPTY_OUTFITS_TEXT


@dataclass(slots=True, frozen=True)
class UploadPromptDescription:
    title: str = TRY_ON_TITLE
    prompt: str = TRY_ON_PROMPT
    main_button: str = MAIN_BUTTON_LABELS[View.VIRTUAL_TRY_ON]


@dataclass(slots=True, frozen=True)
class PreviewOption:
    category: Category
    label: str
    item: ClothingItem


@dataclass(slots=True, frozen=True)
class PreviewDescription:
    overlay: ClothingItem | None
    options: tuple[PreviewOption, ...]
    heading: str = PREVIEW_HEADING
    main_button: str = MAIN_BUTTON_LABELS[View.VIRTUAL_TRY_ON]


@dataclass(slots=True, frozen=True)
class ItemDetailsDescription:
    """Detail card shown when a single item is selected."""

    item: ClothingItem
    title: str
    category_label: str
    actions: tuple[str, ...] = ITEM_ACTIONS


ViewDescription = Union[
    WardrobeDescription,
    OutfitsDescription,
    UploadPromptDescription,
    PreviewDescription,
]


def render(state: ViewState, catalog: Catalog, outfits: OutfitStore) -> ViewDescription:
    """Describe everything the active view must display."""

    match state:
        case WardrobeView():
            return _render_wardrobe(catalog)
        case OutfitsView():
            return _render_outfits(catalog, outfits)
        case TryOnView(stage=TryOnStage.AWAITING_PHOTO):
            return UploadPromptDescription()
        case TryOnView(stage=TryOnStage.PREVIEW_READY):
            return _render_preview(state, catalog)
        case _:
            raise TypeError(f"Unsupported view state: {state!r}")


def describe_item(item: ClothingItem) -> ItemDetailsDescription:
    return ItemDetailsDescription(
        item=item,
        title=item.display_name,
        category_label=category_name(item.category),
    )


def _render_wardrobe(catalog: Catalog) -> WardrobeDescription:
    sections = tuple(
        CategorySection(
            category=category,
            title=category.display_name,
            items=tuple(catalog.filter_by_category(category)),
        )
        for category in Category
    )
    return WardrobeDescription(sections=sections, empty=len(catalog) == 0)


def _render_outfits(catalog: Catalog, outfits: OutfitStore) -> OutfitsDescription:
    cards = []
    for outfit in outfits.list():
        # Dangling references (deleted items) are dropped from the collage.
        collage = tuple(
            item for item in (catalog.get(item_id) for item_id in outfit.items) if item is not None
        )
        cards.append(
            OutfitCard(
                outfit_id=outfit.id,
                title=outfit.title,
                description=outfit.description or NO_DESCRIPTION,
                collage=collage,
            )
        )
    return OutfitsDescription(cards=tuple(cards), empty=not cards)


def _render_preview(state: TryOnView, catalog: Catalog) -> PreviewDescription:
    rng = random.Random(state.suggestion_seed)
    options = tuple(
        PreviewOption(category=category, label=category.display_name, item=item)
        for category, item in representative_items(Category, catalog, rng)
    )
    return PreviewDescription(overlay=state.overlay, options=options)
