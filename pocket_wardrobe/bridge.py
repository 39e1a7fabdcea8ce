"""Boundary between the wardrobe core and the hosting messenger."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable, Protocol


class UploadKind(str, Enum):
    CLOTHING = "clothing"
    SELFIE = "selfie"


def upload_request_payload(kind: UploadKind | str) -> dict[str, str]:
    """Message body the host expects for an upload request."""

    return {"action": "requestUpload", "type": UploadKind(kind).value}


class HostBridge(Protocol):
    """Outbound calls the core makes into the host. Fire-and-forget."""

    def request_upload(self, kind: UploadKind) -> None: ...

    def upload_settled(self, kind: UploadKind) -> None:
        """The core no longer waits for an upload of this kind."""


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Schedules deferred callbacks without blocking the caller."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class LoopScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
