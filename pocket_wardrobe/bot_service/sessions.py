"""Per-chat wardrobe sessions kept in memory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from aiogram import Bot

from pocket_wardrobe.bot_service.bridge import TelegramHostBridge
from pocket_wardrobe.bot_service.presenter import present
from pocket_wardrobe.config.settings import Settings
from pocket_wardrobe.logic import WardrobeSession
from pocket_wardrobe.metrics import active_sessions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChatSession:
    """A wardrobe session plus the chat-level upload bookkeeping."""

    chat_id: int
    bridge: TelegramHostBridge
    wardrobe: WardrobeSession
    pending_photo: dict[str, Any] | None = field(default=None)


class SessionRegistry:
    """Creates sessions lazily, one per chat."""

    def __init__(self, settings: Settings, bot: Bot) -> None:
        self._settings = settings
        self._bot = bot
        self._sessions: dict[int, ChatSession] = {}

    def get(self, chat_id: int) -> ChatSession:
        chat = self._sessions.get(chat_id)
        if chat is None:
            chat = self._create(chat_id)
            self._sessions[chat_id] = chat
            active_sessions.inc()
            logger.info("Opened wardrobe session for chat %s", chat_id)
        return chat

    def reset(self, chat_id: int) -> ChatSession:
        """Drop the chat's session and start a fresh one."""

        chat = self._sessions.pop(chat_id, None)
        if chat is not None:
            chat.wardrobe.close()
            active_sessions.dec()
        return self.get(chat_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def _create(self, chat_id: int) -> ChatSession:
        bridge = TelegramHostBridge(self._bot, chat_id)
        wardrobe = WardrobeSession.from_settings(self._settings, bridge)
        chat = ChatSession(chat_id=chat_id, bridge=bridge, wardrobe=wardrobe)
        wardrobe.on_deferred_render = lambda description: self._push(chat, description)
        return chat

    def _push(self, chat: ChatSession, description: Any) -> None:
        message = present(description, chat.wardrobe.state.view)
        chat.bridge.spawn(
            self._bot.send_message(chat.chat_id, message.text, reply_markup=message.reply_markup)
        )
