"""Tests for the Telegram bridge, session registry and handler helpers."""

from __future__ import annotations

import asyncio
import logging

import pytest
import pytest_mock
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message

from pocket_wardrobe.bot_service import bot as bot_module
from pocket_wardrobe.bot_service.bridge import UPLOAD_PROMPTS, TelegramHostBridge
from pocket_wardrobe.bot_service.handlers.common import show
from pocket_wardrobe.bot_service.presenter import present
from pocket_wardrobe.bot_service.sessions import SessionRegistry
from pocket_wardrobe.bridge import UploadKind, upload_request_payload
from pocket_wardrobe.config.settings import Settings
from pocket_wardrobe.render import UploadPromptDescription
from pocket_wardrobe.view_state import TryOnStage, View


def test_upload_request_payload_matches_host_format() -> None:
    assert upload_request_payload("selfie") == {"action": "requestUpload", "type": "selfie"}


@pytest.mark.asyncio
async def test_bridge_sends_prompt_and_tracks_pending(mocker: pytest_mock.MockerFixture) -> None:
    bot = mocker.Mock()
    bot.send_message = mocker.AsyncMock()
    bridge = TelegramHostBridge(bot, chat_id=42)

    bridge.request_upload(UploadKind.SELFIE)
    bridge.request_upload(UploadKind.SELFIE)
    await asyncio.sleep(0)

    bot.send_message.assert_awaited_with(42, UPLOAD_PROMPTS[UploadKind.SELFIE])
    assert bridge.take_pending() is UploadKind.SELFIE
    assert bridge.take_pending() is None


def test_bridge_drops_settled_request(mocker: pytest_mock.MockerFixture) -> None:
    bridge = TelegramHostBridge(mocker.Mock(), chat_id=42)
    mocker.patch.object(bridge, "spawn")

    bridge.request_upload(UploadKind.SELFIE)
    bridge.request_upload(UploadKind.CLOTHING)
    bridge.upload_settled(UploadKind.SELFIE)
    bridge.upload_settled(UploadKind.SELFIE)

    assert bridge.take_pending() is UploadKind.CLOTHING
    assert bridge.take_pending() is None


@pytest.mark.asyncio
async def test_photo_after_simulated_preview_is_clothing(mocker: pytest_mock.MockerFixture) -> None:
    bot = mocker.Mock()
    bot.send_message = mocker.AsyncMock()
    registry = SessionRegistry(Settings(upload_delay=0.01), bot)
    chat = registry.get(1)
    chat.wardrobe.select_view(View.VIRTUAL_TRY_ON)
    chat.wardrobe.start_upload(UploadKind.SELFIE)
    await asyncio.sleep(0.05)

    chat.wardrobe.select_view(View.WARDROBE)
    chat.wardrobe.press_main_button()

    assert chat.bridge.take_pending() is UploadKind.CLOTHING
    assert chat.bridge.take_pending() is None


@pytest.mark.asyncio
async def test_navigation_drops_unanswered_selfie_request(mocker: pytest_mock.MockerFixture) -> None:
    bot = mocker.Mock()
    bot.send_message = mocker.AsyncMock()
    registry = SessionRegistry(Settings(upload_delay=5.0), bot)
    chat = registry.get(1)
    chat.wardrobe.select_view(View.VIRTUAL_TRY_ON)
    chat.wardrobe.start_upload(UploadKind.SELFIE)

    chat.wardrobe.select_view(View.WARDROBE)
    chat.wardrobe.press_main_button()

    assert chat.bridge.take_pending() is UploadKind.CLOTHING


@pytest.mark.asyncio
async def test_registry_reuses_and_resets_sessions(mocker: pytest_mock.MockerFixture) -> None:
    bot = mocker.Mock()
    registry = SessionRegistry(Settings(load_sample=False), bot)

    first = registry.get(1)
    first.wardrobe.select_view(View.OUTFITS)

    assert registry.get(1) is first
    fresh = registry.reset(1)
    assert fresh is not first
    assert fresh.wardrobe.state.view is View.WARDROBE
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_deferred_preview_is_pushed_to_chat(mocker: pytest_mock.MockerFixture) -> None:
    bot = mocker.Mock()
    bot.send_message = mocker.AsyncMock()
    registry = SessionRegistry(Settings(upload_delay=0.01), bot)
    chat = registry.get(7)
    chat.wardrobe.select_view(View.VIRTUAL_TRY_ON)

    chat.wardrobe.start_upload(UploadKind.SELFIE)
    await asyncio.sleep(0.05)

    assert chat.wardrobe.state.stage is TryOnStage.PREVIEW_READY
    texts = [call.args[1] for call in bot.send_message.await_args_list]
    assert UPLOAD_PROMPTS[UploadKind.SELFIE] in texts
    assert any("Select clothing to try on" in text for text in texts)


@pytest.mark.asyncio
async def test_show_ignores_unmodified_message(mocker: pytest_mock.MockerFixture) -> None:
    query = mocker.Mock()
    query.message = mocker.Mock(spec=Message)
    query.message.edit_text = mocker.AsyncMock(
        side_effect=TelegramBadRequest(method=mocker.Mock(), message="Bad Request: message is not modified"),
    )

    await show(query, present(UploadPromptDescription(), View.VIRTUAL_TRY_ON))

    query.message.edit_text.assert_awaited_once()


@pytest.mark.asyncio
async def test_show_propagates_other_errors(mocker: pytest_mock.MockerFixture) -> None:
    query = mocker.Mock()
    query.message = mocker.Mock(spec=Message)
    query.message.edit_text = mocker.AsyncMock(
        side_effect=TelegramBadRequest(method=mocker.Mock(), message="Bad Request: chat not found"),
    )

    with pytest.raises(TelegramBadRequest):
        await show(query, present(UploadPromptDescription(), View.VIRTUAL_TRY_ON))


@pytest.mark.asyncio
async def test_main_configures_logging_and_requires_token(mocker: pytest_mock.MockerFixture) -> None:
    mocker.patch.object(bot_module, "get_settings", return_value=Settings(bot_token="", log_level="debug"))
    basic_config = mocker.patch.object(bot_module.logging, "basicConfig")

    with pytest.raises(RuntimeError, match="TELEGRAM_BOT_TOKEN"):
        await bot_module.main()

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
