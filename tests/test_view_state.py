"""Tests for the total view state machine."""

from __future__ import annotations

import pytest

from pocket_wardrobe.models import Category
from pocket_wardrobe.view_state import (
    OutfitsView,
    TryOnStage,
    TryOnView,
    View,
    ViewStateMachine,
    WardrobeView,
)
from tests.conftest import make_item

JACKET = make_item("jacket", Category.OUTERWEAR, "Jacket")


def _machine_in(state: str) -> ViewStateMachine:
    machine = ViewStateMachine()
    if state == "outfits":
        machine.switch_to(View.OUTFITS)
    elif state == "awaiting":
        machine.switch_to(View.VIRTUAL_TRY_ON)
    elif state == "preview":
        machine.switch_to(View.VIRTUAL_TRY_ON)
        machine.photo_supplied(5)
    elif state == "overlay":
        machine.switch_to(View.VIRTUAL_TRY_ON)
        machine.photo_supplied(5)
        machine.overlay_requested(JACKET)
    return machine


def test_initial_state_is_wardrobe() -> None:
    assert ViewStateMachine().current == WardrobeView()


@pytest.mark.parametrize("state", ["wardrobe", "outfits"])
def test_photo_outside_try_on_is_ignored(state: str) -> None:
    machine = _machine_in(state)
    before = machine.current

    machine.photo_supplied(1)

    assert machine.current == before


@pytest.mark.parametrize("state", ["wardrobe", "outfits", "awaiting"])
def test_overlay_outside_preview_is_ignored(state: str) -> None:
    machine = _machine_in(state)
    before = machine.current

    machine.overlay_requested(JACKET)

    assert machine.current == before


def test_photo_moves_to_preview_without_overlay() -> None:
    machine = _machine_in("awaiting")

    machine.photo_supplied(11)

    assert machine.current == TryOnView(stage=TryOnStage.PREVIEW_READY, overlay=None, suggestion_seed=11)


def test_overlay_replaces_selection_and_keeps_seed() -> None:
    machine = _machine_in("overlay")
    shoes = make_item("shoes", Category.SHOES)

    machine.overlay_requested(shoes)

    assert machine.current == TryOnView(stage=TryOnStage.PREVIEW_READY, overlay=shoes, suggestion_seed=5)


@pytest.mark.parametrize("state", ["awaiting", "preview", "overlay"])
def test_switch_to_wardrobe_clears_preview(state: str) -> None:
    machine = _machine_in(state)

    machine.switch_to(View.WARDROBE)

    assert machine.current == WardrobeView()


def test_switch_to_try_on_resets_preview() -> None:
    machine = _machine_in("overlay")

    machine.switch_to("virtualTryOn")

    assert machine.current == TryOnView()


def test_every_switch_bumps_generation() -> None:
    machine = ViewStateMachine()

    machine.switch_to(View.OUTFITS)
    machine.switch_to(View.OUTFITS)

    assert machine.generation == 2
    assert machine.current == OutfitsView()
