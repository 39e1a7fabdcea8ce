"""Item and outfit button handlers."""

from __future__ import annotations

from aiogram import Router
from aiogram.types import CallbackQuery

from pocket_wardrobe.bot_service.callbacks import ItemCallback, OutfitCallback
from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.handlers.common import chat_for, show, show_current_view
from pocket_wardrobe.bot_service.presenter import present_item


def setup(router: Router, context: BotContext) -> None:
    """Register item detail and outfit action handlers."""

    @router.callback_query(ItemCallback.filter())
    async def handle_item(query: CallbackQuery, callback_data: ItemCallback) -> None:
        chat = chat_for(context, query)
        wardrobe = chat.wardrobe
        item_id = callback_data.item_id

        if callback_data.action == "open":
            details = wardrobe.select_item(item_id)
            if details is None:
                await query.answer("This item was removed.")
                await show_current_view(query, chat)
                return
            await show(query, present_item(details))
            await query.answer()
            return

        if callback_data.action == "edit":
            wardrobe.edit_item(item_id)
            await query.answer("Editing is not available yet.")
            return

        if callback_data.action == "remove":
            wardrobe.delete_item(item_id)
            await query.answer("Item removed.")
        elif callback_data.action == "try_on":
            wardrobe.try_on_item(item_id)
            await query.answer()
        elif callback_data.action == "overlay":
            wardrobe.choose_preview_overlay(item_id)
            await query.answer()
        else:
            await query.answer()
        await show_current_view(query, chat)

    @router.callback_query(OutfitCallback.filter())
    async def handle_outfit(query: CallbackQuery, callback_data: OutfitCallback) -> None:
        chat = chat_for(context, query)
        if callback_data.action == "save":
            outfit = chat.wardrobe.save_outfit(callback_data.outfit_id)
            await query.answer("Outfit saved." if outfit else "Outfit not found.")
            return
        if callback_data.action == "try_on":
            chat.wardrobe.try_on_outfit(callback_data.outfit_id)
        await show_current_view(query, chat)
        await query.answer()
