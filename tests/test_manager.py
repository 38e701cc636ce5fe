"""Tests for clippy.manager.ClipboardManager -- the end-to-end flows."""

from __future__ import annotations

import logging

import pytest

from clippy.config import ClippyConfig, ClippyPaths
from clippy.constants import SECONDS_PER_DAY as DAY
from clippy.errors import LimitReachedError, NotFoundError
from clippy.manager import ClipboardManager
from clippy.models import ImageRecord


class TestFlows:
    def test_capture_then_list(self, manager):
        manager.capture_text("one")
        manager.capture_text("two")
        assert [r.content for r in manager.list_history()] == ["two", "one"]
        assert [r.content for r in manager.list_history(1)] == ["two"]

    def test_repeat_capture_adds_once(self, manager):
        before = len(manager.list_history())
        manager.capture_text("x")
        manager.capture_text("x")
        assert len(manager.list_history()) == before + 1

    def test_pin_by_history_index(self, manager):
        manager.capture_text("older")
        manager.capture_text("newer")
        assert manager.pin(2, "label") == 1
        pin = manager.get_pin(1)
        assert (pin.content, pin.label) == ("older", "label")

    def test_pin_bad_history_index(self, manager):
        with pytest.raises(NotFoundError):
            manager.pin(1)

    def test_pin_limit(self, paths, clock):
        mgr = ClipboardManager(ClippyConfig(max_pins=1), paths, clock)
        mgr.capture_text("X")
        mgr.capture_text("Y")
        assert mgr.pin(2) == 1
        with pytest.raises(LimitReachedError):
            mgr.pin(1)

    def test_unpin(self, manager):
        manager.capture_text("a")
        manager.pin(1)
        assert manager.unpin(1).content == "a"
        assert manager.list_pins() == []

    def test_search_covers_pins_and_history(self, manager):
        manager.capture_text("deploy script")
        manager.pin(1, "ops")
        manager.capture_text("dinner plans")
        hits = manager.search("deploy")
        assert [(h.record.content, h.pinned) for h in hits] == [
            ("deploy script", True),
            ("deploy script", False),
        ]

    def test_clear_keeps_pins(self, manager):
        manager.capture_text("a")
        manager.pin(1)
        assert manager.clear() is True
        assert manager.list_history() == []
        assert len(manager.list_pins()) == 1

    def test_pinned_image_survives_eviction(self, paths, clock):
        mgr = ClipboardManager(ClippyConfig(max_history_items=1), paths, clock)
        img = mgr.capture_image(b"picture")
        mgr.pin(1)
        mgr.capture_text("pushes the image out")
        assert not img.path.exists()
        pinned = mgr.get_pin(1)
        assert isinstance(pinned, ImageRecord)
        assert pinned.path.read_bytes() == b"picture"

    def test_separate_managers_separate_configs(self, tmp_path, clock):
        small = ClipboardManager(
            ClippyConfig(max_history_items=1), ClippyPaths.from_home(tmp_path / "a"), clock
        )
        large = ClipboardManager(
            ClippyConfig(max_history_items=9), ClippyPaths.from_home(tmp_path / "b"), clock
        )
        for t in ("1", "2", "3"):
            small.capture_text(t)
            large.capture_text(t)
        assert len(small.list_history()) == 1
        assert len(large.list_history()) == 3


class TestCleanup:
    def test_sweeps_both(self, manager, clock, caplog):
        manager.capture_text("old history")
        manager.pin(1)
        clock.advance(40 * DAY)
        manager.capture_text("new history")
        with caplog.at_level(logging.INFO, logger="clippy"):
            result = manager.cleanup()
        assert (result.history_removed, result.pins_removed) == (1, 1)
        assert result.total == 2
        assert [r.content for r in manager.list_history()] == ["new history"]
        assert "removed 1 history, 1 pins" in caplog.text

    def test_nothing_to_do(self, manager):
        assert manager.cleanup().total == 0
