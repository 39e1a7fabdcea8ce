"""Host bridge that talks to a Telegram chat through aiogram."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Any, Awaitable

from aiogram import Bot

from pocket_wardrobe.bridge import UploadKind, upload_request_payload

logger = logging.getLogger(__name__)

UPLOAD_PROMPTS = {
    UploadKind.CLOTHING: "Send a photo of the clothing item you want to add.",
    UploadKind.SELFIE: "Send a photo of yourself to start the virtual try-on.",
}


class TelegramHostBridge:
    """Forwards upload requests to the chat and remembers what was asked for."""

    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id
        self._pending: deque[UploadKind] = deque()
        self._tasks: set[asyncio.Task[Any]] = set()

    def request_upload(self, kind: UploadKind) -> None:
        logger.info("Chat %s: %s", self._chat_id, upload_request_payload(kind))
        if kind not in self._pending:
            self._pending.append(kind)
        self.spawn(self._bot.send_message(self._chat_id, UPLOAD_PROMPTS[kind]))

    def take_pending(self) -> UploadKind | None:
        """Return the oldest outstanding upload request, if any."""

        return self._pending.popleft() if self._pending else None

    def upload_settled(self, kind: UploadKind) -> None:
        if kind in self._pending:
            self._pending.remove(kind)
            logger.debug("Chat %s: %s request settled", self._chat_id, kind.value)

    def spawn(self, coro: Awaitable[Any]) -> None:
        """Run a send in the background, logging failures."""

        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finish)

    def _finish(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Chat %s: background send failed: %s", self._chat_id, exc)
