"""Shared test fixtures for the clippy test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from clippy.config import ClippyConfig, ClippyPaths
from clippy.manager import ClipboardManager
from clippy.persistence import HistoryStore, ImageBlobStore, PinStore

NOW = 1_700_000_000.0


class FakeClock:
    """Deterministic replacement for ``time.time``."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> ClippyConfig:
    return ClippyConfig(max_history_items=5, max_pins=3, max_entry_length=100)


@pytest.fixture
def paths(tmp_path: Path) -> ClippyPaths:
    return ClippyPaths.from_home(tmp_path)


@pytest.fixture
def images(paths: ClippyPaths) -> ImageBlobStore:
    return ImageBlobStore(paths.images)


@pytest.fixture
def history(paths, images, config, clock) -> HistoryStore:
    return HistoryStore(paths.history, images, config, clock)


@pytest.fixture
def pins(paths, images, config, clock) -> PinStore:
    return PinStore(paths.pins, images, config, clock)


@pytest.fixture
def manager(config, paths, clock) -> ClipboardManager:
    return ClipboardManager(config, paths, clock)
