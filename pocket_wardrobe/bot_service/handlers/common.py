"""Helpers shared by callback and message handlers."""

from __future__ import annotations

from aiogram.exceptions import TelegramBadRequest
from aiogram.types import CallbackQuery, Message

from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.presenter import RenderedMessage, present
from pocket_wardrobe.bot_service.sessions import ChatSession


async def show(query: CallbackQuery, rendered: RenderedMessage) -> None:
    """Replace the message that carried the pressed button."""

    if not isinstance(query.message, Message):
        return
    try:
        await query.message.edit_text(rendered.text, reply_markup=rendered.reply_markup)
    except TelegramBadRequest as exc:
        # Refreshing an unchanged view is not an error.
        if "message is not modified" not in str(exc):
            raise


async def send_current_view(message: Message, chat: ChatSession) -> None:
    rendered = present(chat.wardrobe.render(), chat.wardrobe.state.view)
    await message.answer(rendered.text, reply_markup=rendered.reply_markup)


async def show_current_view(query: CallbackQuery, chat: ChatSession) -> None:
    await show(query, present(chat.wardrobe.render(), chat.wardrobe.state.view))


def chat_for(context: BotContext, query: CallbackQuery) -> ChatSession:
    """Session of the chat the button was pressed in."""

    chat_id = query.message.chat.id if query.message is not None else query.from_user.id
    return context.sessions.get(chat_id)
