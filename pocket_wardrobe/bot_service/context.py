"""Shared dependencies passed into handler setup functions."""

from __future__ import annotations

from dataclasses import dataclass

from pocket_wardrobe.bot_service.sessions import SessionRegistry
from pocket_wardrobe.config.settings import Settings


@dataclass(slots=True)
class BotContext:
    """Container for objects shared across handlers."""

    settings: Settings
    sessions: SessionRegistry
