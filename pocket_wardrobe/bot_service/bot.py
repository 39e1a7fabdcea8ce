"""Entrypoint for the Pocket Wardrobe Telegram bot."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from aiogram import Bot, Dispatcher, Router
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.handlers import setup_handlers
from pocket_wardrobe.bot_service.sessions import SessionRegistry
from pocket_wardrobe.config.settings import get_settings

logger = logging.getLogger(__name__)


async def main() -> None:
    """Initialise dependencies and start polling Telegram."""

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if not settings.bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not configured.")

    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    sessions = SessionRegistry(settings, bot)
    dispatcher = Dispatcher()
    router = Router()
    setup_handlers(router, BotContext(settings=settings, sessions=sessions))
    dispatcher.include_router(router)

    try:
        logger.info("Starting wardrobe bot polling.")
        await dispatcher.start_polling(bot)
    finally:
        with suppress(Exception):
            await bot.session.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
