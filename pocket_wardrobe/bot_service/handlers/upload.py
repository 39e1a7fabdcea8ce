"""Handlers for photo uploads and Mini App upload requests."""

from __future__ import annotations

import json
import logging

from aiogram import F, Router
from aiogram.types import CallbackQuery, Message

from pocket_wardrobe.bot_service.callbacks import CategoryCallback
from pocket_wardrobe.bot_service.context import BotContext
from pocket_wardrobe.bot_service.handlers.common import chat_for, send_current_view, show_current_view
from pocket_wardrobe.bot_service.presenter import category_keyboard
from pocket_wardrobe.bridge import UploadKind
from pocket_wardrobe.models import DuplicateIdError
from pocket_wardrobe.view_state import View

logger = logging.getLogger(__name__)


def setup(router: Router, context: BotContext) -> None:
    """Register media upload handlers."""

    @router.message(F.photo)
    async def handle_photo(message: Message) -> None:
        chat = context.sessions.get(message.chat.id)
        photo = message.photo[-1]
        kind = chat.bridge.take_pending() or UploadKind.CLOTHING

        if kind is UploadKind.SELFIE:
            chat.wardrobe.on_upload_completed(kind, {"image_url": photo.file_id})
            await send_current_view(message, chat)
            return

        chat.pending_photo = {
            "id": photo.file_unique_id,
            "name": (message.caption or "").strip() or None,
            "image_url": photo.file_id,
        }
        await message.answer("Which category does this item belong to?", reply_markup=category_keyboard())

    @router.callback_query(CategoryCallback.filter())
    async def handle_category(query: CallbackQuery, callback_data: CategoryCallback) -> None:
        chat = chat_for(context, query)
        if chat.pending_photo is None:
            await query.answer("Send a photo first.")
            return

        payload = {**chat.pending_photo, "category": callback_data.category}
        chat.pending_photo = None
        try:
            item = chat.wardrobe.on_upload_completed(UploadKind.CLOTHING, payload)
        except DuplicateIdError as exc:
            logger.error("Chat %s: could not store upload: %s", chat.chat_id, exc)
            await query.answer("This photo is already in your wardrobe.")
            return
        except ValueError as exc:
            logger.error("Chat %s: rejected upload payload: %s", chat.chat_id, exc)
            await query.answer("Unknown category.")
            return

        chat.wardrobe.select_view(View.WARDROBE)
        await show_current_view(query, chat)
        await query.answer(f"Added {item.display_name}.")

    @router.message(F.web_app_data)
    async def handle_web_app_data(message: Message) -> None:
        chat = context.sessions.get(message.chat.id)
        try:
            payload = json.loads(message.web_app_data.data)
            kind = UploadKind(payload.get("type"))
        except (json.JSONDecodeError, AttributeError, ValueError) as exc:
            logger.warning("Chat %s: ignoring malformed web app data: %s", chat.chat_id, exc)
            return
        if payload.get("action") != "requestUpload":
            logger.warning("Chat %s: unsupported web app action %r", chat.chat_id, payload.get("action"))
            return
        chat.wardrobe.start_upload(kind)
