"""Turns view descriptions into Telegram message text and inline keyboards."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from pocket_wardrobe.bot_service.callbacks import (
    ActionCallback,
    CategoryCallback,
    ItemCallback,
    NavCallback,
    OutfitCallback,
)
from pocket_wardrobe.models import Category
from pocket_wardrobe.render import (
    ItemDetailsDescription,
    OutfitsDescription,
    PreviewDescription,
    UploadPromptDescription,
    ViewDescription,
    WardrobeDescription,
)
from pocket_wardrobe.view_state import View

NAV_LABELS = {
    View.WARDROBE: "Wardrobe",
    View.OUTFITS: "Outfits",
    View.VIRTUAL_TRY_ON: "Virtual Try-On",
}

ITEM_ACTION_LABELS = {
    "edit": "Edit",
    "remove": "Remove",
    "try_on": "Try On",
}


@dataclass(slots=True, frozen=True)
class RenderedMessage:
    """Text and keyboard ready to be sent or edited into a chat."""

    text: str
    reply_markup: InlineKeyboardMarkup


def present(description: ViewDescription, active: View) -> RenderedMessage:
    """Materialise a full view description as one Telegram message."""

    if isinstance(description, WardrobeDescription):
        text, rows = _wardrobe(description)
    elif isinstance(description, OutfitsDescription):
        text, rows = _outfits(description)
    elif isinstance(description, UploadPromptDescription):
        text, rows = _upload_prompt(description)
    elif isinstance(description, PreviewDescription):
        text, rows = _preview(description)
    else:
        raise TypeError(f"Unsupported description: {description!r}")

    keyboard = [_navigation_row(active), *rows]
    keyboard.append(
        [
            InlineKeyboardButton(
                text=description.main_button,
                callback_data=ActionCallback(name="main").pack(),
            ),
            InlineKeyboardButton(text="↻", callback_data=ActionCallback(name="refresh").pack()),
        ]
    )
    return RenderedMessage(text=text, reply_markup=InlineKeyboardMarkup(inline_keyboard=keyboard))


def present_item(details: ItemDetailsDescription) -> RenderedMessage:
    item_id = details.item.id
    text = (
        f"<b>{escape(details.title)}</b>\n"
        f"Category: {escape(details.category_label)}"
    )
    actions = [
        InlineKeyboardButton(
            text=ITEM_ACTION_LABELS[action],
            callback_data=ItemCallback(action=action, item_id=item_id).pack(),
        )
        for action in details.actions
    ]
    back = [InlineKeyboardButton(text="× Close", callback_data=ActionCallback(name="refresh").pack())]
    return RenderedMessage(text=text, reply_markup=InlineKeyboardMarkup(inline_keyboard=[actions, back]))


def category_keyboard() -> InlineKeyboardMarkup:
    """Keyboard asking which category a freshly uploaded garment belongs to."""

    buttons = [
        InlineKeyboardButton(
            text=category.display_name,
            callback_data=CategoryCallback(category=category.value).pack(),
        )
        for category in Category
    ]
    return InlineKeyboardMarkup(inline_keyboard=[buttons[:3], buttons[3:]])


def _navigation_row(active: View) -> list[InlineKeyboardButton]:
    return [
        InlineKeyboardButton(
            text=f"• {label}" if view is active else label,
            callback_data=NavCallback(view=view.value).pack(),
        )
        for view, label in NAV_LABELS.items()
    ]


def _wardrobe(description: WardrobeDescription) -> tuple[str, list[list[InlineKeyboardButton]]]:
    lines: list[str] = []
    rows: list[list[InlineKeyboardButton]] = []
    for section in description.sections:
        lines.append(f"<b>{escape(section.title)}</b>")
        lines.extend(f"  {escape(item.display_name)}" for item in section.items)
        rows.extend(
            [
                InlineKeyboardButton(
                    text=item.display_name,
                    callback_data=ItemCallback(action="open", item_id=item.id).pack(),
                )
            ]
            for item in section.items
        )
    if description.empty:
        lines.append("")
        lines.append(escape(description.empty_text))
    return "\n".join(lines), rows


def _outfits(description: OutfitsDescription) -> tuple[str, list[list[InlineKeyboardButton]]]:
    if description.empty:
        return escape(description.empty_text), []

    blocks: list[str] = []
    rows: list[list[InlineKeyboardButton]] = []
    for card in description.cards:
        collage = ", ".join(escape(item.display_name) for item in card.collage) or "—"
        blocks.append(f"<b>{escape(card.title)}</b>\n{escape(card.description)}\n{collage}")
        rows.append(
            [
                InlineKeyboardButton(
                    text=f"Save {card.title}",
                    callback_data=OutfitCallback(action="save", outfit_id=card.outfit_id).pack(),
                ),
                InlineKeyboardButton(
                    text="Try On",
                    callback_data=OutfitCallback(action="try_on", outfit_id=card.outfit_id).pack(),
                ),
            ]
        )
    return "\n\n".join(blocks), rows


def _upload_prompt(description: UploadPromptDescription) -> tuple[str, list[list[InlineKeyboardButton]]]:
    text = f"<b>{escape(description.title)}</b>\n{escape(description.prompt)}"
    rows = [[InlineKeyboardButton(text="Upload Photo", callback_data=ActionCallback(name="upload_selfie").pack())]]
    return text, rows


def _preview(description: PreviewDescription) -> tuple[str, list[list[InlineKeyboardButton]]]:
    overlay = description.overlay
    overlay_line = f"Wearing: {escape(overlay.display_name)}" if overlay else "Pick a garment to overlay."
    text = f"<b>{escape(description.heading)}</b>\n{overlay_line}"
    rows = [
        [
            InlineKeyboardButton(
                text=f"{option.label}: {option.item.display_name}",
                callback_data=ItemCallback(action="overlay", item_id=option.item.id).pack(),
            )
        ]
        for option in description.options
    ]
    return text, rows
