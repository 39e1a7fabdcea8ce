"""Wardrobe session: inbound commands, host events and the deferred upload."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from pocket_wardrobe.bridge import Cancellable, HostBridge, LoopScheduler, Scheduler, UploadKind
from pocket_wardrobe.config.settings import Settings
from pocket_wardrobe.metrics import outfits_generated_total, renders_total, upload_requests_total
from pocket_wardrobe.models import ClothingItem, Outfit
from pocket_wardrobe.render import ItemDetailsDescription, ViewDescription, describe_item, render
from pocket_wardrobe.selection import OUTFIT_CATEGORIES, random_one_from_each_category
from pocket_wardrobe.storage import Catalog, OutfitStore, load_seed
from pocket_wardrobe.view_state import TryOnView, View, ViewState, ViewStateMachine

logger = logging.getLogger(__name__)

GENERATED_OUTFIT_NAME = "New Generated Outfit"
GENERATED_OUTFIT_DESCRIPTION = "AI-generated outfit based on your style preferences"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WardrobeSession:
    """Owns one user's catalog, outfits and active view.

    All methods run on the event loop thread. The only deferred work is the
    simulated selfie upload, scheduled through ``scheduler`` and re-checked
    against the view generation before it is applied.
    """

    def __init__(
        self,
        bridge: HostBridge,
        *,
        catalog: Catalog | None = None,
        outfits: OutfitStore | None = None,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
        upload_delay: float = 1.0,
        clock: Callable[[], datetime] = _utcnow,
        on_deferred_render: Callable[[ViewDescription], None] | None = None,
    ) -> None:
        self._bridge = bridge
        self.on_deferred_render = on_deferred_render
        self.catalog = catalog if catalog is not None else Catalog()
        self.outfits = outfits if outfits is not None else OutfitStore()
        self._rng = rng or random.Random()
        self._scheduler = scheduler or LoopScheduler()
        self._upload_delay = upload_delay
        self._clock = clock
        self._machine = ViewStateMachine()
        self._pending_upload: Cancellable | None = None
        self._pending_overlay_id: str | None = None
        self._last_outfit_ms = 0

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        bridge: HostBridge,
        *,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
        on_deferred_render: Callable[[ViewDescription], None] | None = None,
    ) -> "WardrobeSession":
        """Build a session with seed data and limits taken from configuration."""

        seed = load_seed(settings.seed_file, use_sample=settings.load_sample)
        return cls(
            bridge,
            catalog=Catalog(seed.items),
            outfits=OutfitStore(seed.outfits, max_outfits=settings.max_outfits),
            rng=rng,
            scheduler=scheduler,
            upload_delay=settings.upload_delay,
            on_deferred_render=on_deferred_render,
        )

    @property
    def state(self) -> ViewState:
        return self._machine.current

    @property
    def upload_pending(self) -> bool:
        return self._pending_upload is not None

    def render(self) -> ViewDescription:
        """Return the full description of the active view."""

        state = self._machine.current
        renders_total.labels(view=state.view.value).inc()
        return render(state, self.catalog, self.outfits)

    # Inbound commands

    def select_view(self, view: View | str) -> ViewDescription:
        self._cancel_pending_upload()
        self._pending_overlay_id = None
        self._machine.switch_to(view)
        return self.render()

    def select_item(self, item_id: str) -> ItemDetailsDescription | None:
        item = self.catalog.get(item_id)
        if item is None:
            logger.debug("Selected item %s no longer exists", item_id)
            return None
        return describe_item(item)

    def delete_item(self, item_id: str) -> ViewDescription:
        self.catalog.remove(item_id)
        return self.render()

    def edit_item(self, item_id: str) -> ClothingItem | None:
        """Hook for item editing; the edit form lives in the host."""

        item = self.catalog.get(item_id)
        logger.info("Edit requested for item %s (found=%s)", item_id, item is not None)
        return item

    def generate_outfit(self) -> Outfit:
        """Compose a random outfit and prepend it to the outfit store."""

        created = self._clock()
        outfit = Outfit(
            id=self._next_outfit_id(created),
            items=tuple(random_one_from_each_category(OUTFIT_CATEGORIES, self.catalog, self._rng)),
            name=GENERATED_OUTFIT_NAME,
            description=GENERATED_OUTFIT_DESCRIPTION,
            created=created,
        )
        self.outfits.add(outfit)
        outfits_generated_total.inc()
        logger.info("Generated outfit %s with %d item(s)", outfit.id, len(outfit.items))
        return outfit

    def save_outfit(self, outfit_id: str) -> Outfit | None:
        """Hook for saving an outfit; storage is handled outside the session."""

        outfit = self.outfits.get(outfit_id)
        logger.info("Save requested for outfit %s (found=%s)", outfit_id, outfit is not None)
        return outfit

    def try_on_outfit(self, outfit_id: str) -> ViewDescription | None:
        """Open the try-on screen with the outfit's first garment preselected."""

        outfit = self.outfits.get(outfit_id)
        if outfit is None:
            return None
        description = self.select_view(View.VIRTUAL_TRY_ON)
        self._pending_overlay_id = next(
            (item_id for item_id in outfit.items if item_id in self.catalog),
            None,
        )
        return description

    def try_on_item(self, item_id: str) -> ViewDescription | None:
        if item_id not in self.catalog:
            return None
        description = self.select_view(View.VIRTUAL_TRY_ON)
        self._pending_overlay_id = item_id
        return description

    def start_upload(self, kind: UploadKind | str) -> None:
        """Ask the host for a photo; selfies also schedule the simulated preview."""

        upload_kind = UploadKind(kind)
        if upload_kind is UploadKind.SELFIE:
            # settle the previous request before queueing the new one
            self._cancel_pending_upload()
        self._bridge.request_upload(upload_kind)
        upload_requests_total.labels(kind=upload_kind.value).inc()
        if upload_kind is not UploadKind.SELFIE:
            return
        if not isinstance(self._machine.current, TryOnView):
            logger.debug("Selfie requested outside try-on; no preview scheduled")
            return
        generation = self._machine.generation
        self._pending_upload = self._scheduler.call_later(
            self._upload_delay,
            lambda: self._on_upload_delay_elapsed(generation),
        )

    def choose_preview_overlay(self, item_id: str) -> ViewDescription:
        item = self.catalog.get(item_id)
        if item is not None:
            self._machine.overlay_requested(item)
        return self.render()

    def press_main_button(self) -> ViewDescription:
        """Context action of the host's main button for the active view."""

        view = self._machine.current.view
        if view is View.WARDROBE:
            self.start_upload(UploadKind.CLOTHING)
        elif view is View.OUTFITS:
            self.generate_outfit()
        else:
            self.start_upload(UploadKind.SELFIE)
        return self.render()

    # Inbound host events

    def on_viewport_changed(self) -> ViewDescription:
        return self.render()

    def on_upload_completed(self, kind: UploadKind | str, result: Mapping[str, Any]) -> ClothingItem | None:
        """Apply an upload reported by the host.

        Clothing uploads are added to the catalog and may raise
        :class:`~pocket_wardrobe.models.DuplicateIdError`.
        """

        upload_kind = UploadKind(kind)
        if upload_kind is UploadKind.CLOTHING:
            item = ClothingItem.from_mapping(result)
            self.catalog.add(item)
            logger.info("Added %s to %s", item.id, item.category.value)
            return item
        self._cancel_pending_upload()
        self._apply_photo()
        return None

    def close(self) -> None:
        self._cancel_pending_upload()

    def _on_upload_delay_elapsed(self, generation: int) -> None:
        self._pending_upload = None
        self._bridge.upload_settled(UploadKind.SELFIE)
        if generation != self._machine.generation:
            logger.debug("Discarding stale upload callback from generation %d", generation)
            return
        if self._apply_photo() and self.on_deferred_render is not None:
            self.on_deferred_render(self.render())

    def _apply_photo(self) -> bool:
        before = self._machine.current
        after = self._machine.photo_supplied(self._rng.randrange(2**32))
        if after is before:
            return False
        overlay_id, self._pending_overlay_id = self._pending_overlay_id, None
        if overlay_id is not None:
            item = self.catalog.get(overlay_id)
            if item is not None:
                self._machine.overlay_requested(item)
        return True

    def _cancel_pending_upload(self) -> None:
        if self._pending_upload is not None:
            self._pending_upload.cancel()
            self._pending_upload = None
            self._bridge.upload_settled(UploadKind.SELFIE)

    def _next_outfit_id(self, created: datetime) -> str:
        millis = max(int(created.timestamp() * 1000), self._last_outfit_ms + 1)
        self._last_outfit_ms = millis
        return f"outfit-{millis}"
