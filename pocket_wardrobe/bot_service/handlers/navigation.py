"""Navigation bar, main button and refresh callbacks."""

from __future__ import annotations

from aiogram import Router
from aiogram.types import CallbackQuery

from pocket_wardrobe.bot_service.callbacks import ActionCallback, NavCallback
from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.handlers.common import chat_for, show_current_view
from pocket_wardrobe.bridge import UploadKind
from pocket_wardrobe.view_state import View


def setup(router: Router, context: BotContext) -> None:
    """Register view switching handlers."""

    @router.callback_query(NavCallback.filter())
    async def handle_navigation(query: CallbackQuery, callback_data: NavCallback) -> None:
        chat = chat_for(context, query)
        try:
            view = View(callback_data.view)
        except ValueError:
            await query.answer("Unknown view.")
            return
        chat.wardrobe.select_view(view)
        await show_current_view(query, chat)
        await query.answer()

    @router.callback_query(ActionCallback.filter())
    async def handle_action(query: CallbackQuery, callback_data: ActionCallback) -> None:
        chat = chat_for(context, query)
        if callback_data.name == "main":
            chat.wardrobe.press_main_button()
        elif callback_data.name == "upload_selfie":
            chat.wardrobe.start_upload(UploadKind.SELFIE)
        else:
            chat.wardrobe.on_viewport_changed()
        await show_current_view(query, chat)
        await query.answer()
