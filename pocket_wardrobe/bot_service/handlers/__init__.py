"""Router setup for the wardrobe bot."""

from __future__ import annotations

from aiogram import Router

from pocket_wardrobe.bot_service.context import BotContext

from . import navigation, start, upload, wardrobe


def setup_handlers(router: Router, context: BotContext) -> None:
    """Attach all handler groups to the provided router."""

    start.setup(router, context)
    navigation.setup(router, context)
    wardrobe.setup(router, context)
    upload.setup(router, context)
