"""Finite state machine selecting the active wardrobe view."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pocket_wardrobe.models import ClothingItem

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Top-level screens reachable from the navigation bar."""

    WARDROBE = "wardrobe"
    OUTFITS = "outfits"
    VIRTUAL_TRY_ON = "virtualTryOn"


class TryOnStage(str, Enum):
    AWAITING_PHOTO = "awaiting_photo"
    PREVIEW_READY = "preview_ready"


@dataclass(slots=True, frozen=True)
class WardrobeView:
    view = View.WARDROBE


@dataclass(slots=True, frozen=True)
class OutfitsView:
    view = View.OUTFITS


@dataclass(slots=True, frozen=True)
class TryOnView:
    """Virtual try-on screen with its photo/preview sub-state."""

    stage: TryOnStage = TryOnStage.AWAITING_PHOTO
    overlay: ClothingItem | None = None
    suggestion_seed: int = 0

    view = View.VIRTUAL_TRY_ON


ViewState = Union[WardrobeView, OutfitsView, TryOnView]


def initial_state(view: View) -> ViewState:
    """Return the fresh state entered when navigating to ``view``."""

    if view is View.WARDROBE:
        return WardrobeView()
    if view is View.OUTFITS:
        return OutfitsView()
    return TryOnView()


class ViewStateMachine:
    """Holds the active view; every operation is defined for every state."""

    def __init__(self) -> None:
        self._state: ViewState = WardrobeView()
        self._generation = 0

    @property
    def current(self) -> ViewState:
        return self._state

    @property
    def generation(self) -> int:
        """Counter bumped on every navigation, used to detect stale callbacks."""

        return self._generation

    def switch_to(self, view: View | str) -> ViewState:
        """Navigate unconditionally, discarding any try-on preview."""

        self._state = initial_state(View(view))
        self._generation += 1
        logger.debug("Switched to %s (generation %d)", self._state.view.value, self._generation)
        return self._state

    def photo_supplied(self, suggestion_seed: int = 0) -> ViewState:
        """Move the try-on screen to the preview; ignored outside try-on."""

        if not isinstance(self._state, TryOnView):
            logger.debug("Ignoring photo while in %s", self._state.view.value)
            return self._state
        self._state = TryOnView(stage=TryOnStage.PREVIEW_READY, suggestion_seed=suggestion_seed)
        return self._state

    def overlay_requested(self, item: ClothingItem) -> ViewState:
        """Replace the preview overlay; ignored unless a preview is shown."""

        state = self._state
        if not isinstance(state, TryOnView) or state.stage is not TryOnStage.PREVIEW_READY:
            logger.debug("Ignoring overlay %s outside of preview", item.id)
            return state
        self._state = TryOnView(
            stage=TryOnStage.PREVIEW_READY,
            overlay=item,
            suggestion_seed=state.suggestion_seed,
        )
        return self._state
