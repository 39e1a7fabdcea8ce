"""Start and reset command handlers."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.handlers.common import send_current_view


def setup(router: Router, context: BotContext) -> None:
    """Register /start and /reset handlers."""

    @router.message(CommandStart())
    async def handle_start(message: Message) -> None:
        chat = context.sessions.get(message.chat.id)
        await message.answer("Welcome to Pocket Wardrobe! Browse your clothes, build outfits and try them on.")
        await send_current_view(message, chat)

    @router.message(Command("reset"))
    async def handle_reset(message: Message) -> None:
        chat = context.sessions.reset(message.chat.id)
        await message.answer("Your wardrobe session was reset.")
        await send_current_view(message, chat)
