"""Inline keyboard payloads exchanged with Telegram."""

from __future__ import annotations

from aiogram.filters.callback_data import CallbackData


class NavCallback(CallbackData, prefix="nav"):
    view: str


class ItemCallback(CallbackData, prefix="item"):
    """Actions on a single clothing item (open, edit, remove, try_on, overlay)."""

    action: str
    item_id: str


class OutfitCallback(CallbackData, prefix="outfit"):
    action: str
    outfit_id: str


class ActionCallback(CallbackData, prefix="act"):
    """View-level actions: main button, refresh, selfie upload."""

    name: str


class CategoryCallback(CallbackData, prefix="cat"):
    category: str
