"""Shared fixtures: fake host bridge, manual scheduler and sample catalog."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

import pytest

from pocket_wardrobe.bridge import UploadKind
from pocket_wardrobe.logic import WardrobeSession
from pocket_wardrobe.models import Category, ClothingItem
from pocket_wardrobe.storage import Catalog, OutfitStore


class FakeBridge:
    """Records outbound upload requests."""

    def __init__(self) -> None:
        self.requests: list[UploadKind] = []
        self.settled: list[UploadKind] = []

    def request_upload(self, kind: UploadKind) -> None:
        self.requests.append(kind)

    def upload_settled(self, kind: UploadKind) -> None:
        self.settled.append(kind)


@dataclass
class ManualHandle:
    delay: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Scheduler whose callbacks only run when the test says so."""

    handles: list[ManualHandle] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    def run_pending(self) -> None:
        for handle in list(self.handles):
            if not handle.cancelled:
                handle.callback()
        self.handles.clear()


def make_item(item_id: str, category: Category, name: str | None = None) -> ClothingItem:
    return ClothingItem(id=item_id, category=category, image_url=f"https://img.test/{item_id}.jpg", name=name)


@pytest.fixture
def bridge() -> FakeBridge:
    return FakeBridge()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        [
            make_item("top-1", Category.TOPS, "Blue T-Shirt"),
            make_item("bottom-1", Category.BOTTOMS, "Black Jeans"),
            make_item("top-2", Category.TOPS, "White Shirt"),
            make_item("shoes-1", Category.SHOES),
            make_item("acc-1", Category.ACCESSORIES, "Sunglasses"),
        ]
    )


@pytest.fixture
def session_factory(bridge: FakeBridge, scheduler: ManualScheduler) -> Callable[..., WardrobeSession]:
    def factory(catalog: Catalog | None = None, outfits: OutfitStore | None = None, **kwargs) -> WardrobeSession:
        kwargs.setdefault("rng", random.Random(7))
        kwargs.setdefault("scheduler", scheduler)
        return WardrobeSession(bridge, catalog=catalog, outfits=outfits, **kwargs)

    return factory
