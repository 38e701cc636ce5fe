"""Tests for clippy.persistence.pins -- promote limits, global dedup, unpin."""

from __future__ import annotations

from pathlib import Path

import pytest

from clippy.config import ClippyConfig
from clippy.errors import (
    AlreadyPinnedError,
    LimitReachedError,
    NotFoundError,
    PersistenceError,
)
from clippy.models import ImageRecord, TextRecord
from clippy.persistence import PinStore


class TestPromote:
    def test_appends_and_returns_position(self, pins, clock):
        assert pins.promote(TextRecord("first", 1.0)) == 1
        assert pins.promote(TextRecord("second", 2.0), "lbl") == 2
        assert pins.load() == [
            TextRecord("first", clock.now),
            TextRecord("second", clock.now, "lbl"),
        ]

    def test_empty_label_is_no_label(self, pins):
        pins.promote(TextRecord("x"), "")
        assert pins.load()[0].label is None

    def test_limit_one_rejects_second(self, paths, images, clock):
        store = PinStore(paths.pins, images, ClippyConfig(max_pins=1), clock)
        assert store.promote(TextRecord("X")) == 1
        with pytest.raises(LimitReachedError) as exc_info:
            store.promote(TextRecord("Y"))
        assert exc_info.value.limit == 1
        assert [p.content for p in store.load()] == ["X"]

    def test_limit_is_never_silent_eviction(self, pins, config):
        for i in range(config.max_pins):
            pins.promote(TextRecord(f"item {i}"))
        for i in range(5):
            with pytest.raises(LimitReachedError):
                pins.promote(TextRecord(f"extra {i}"))
        assert [p.content for p in pins.load()] == [
            f"item {i}" for i in range(config.max_pins)
        ]

    def test_duplicate_anywhere_rejected(self, pins):
        """Pins dedupe against every pin, not only the newest."""
        pins.promote(TextRecord("a"))
        pins.promote(TextRecord("b"))
        with pytest.raises(AlreadyPinnedError) as exc_info:
            pins.promote(TextRecord("a"))
        assert exc_info.value.position == 1
        assert len(pins.load()) == 2

    def test_full_check_precedes_duplicate_check(self, paths, images, clock):
        store = PinStore(paths.pins, images, ClippyConfig(max_pins=1), clock)
        store.promote(TextRecord("a"))
        with pytest.raises(LimitReachedError):
            store.promote(TextRecord("a"))

    def test_image_pin_owns_a_copy(self, pins, history):
        src = history.capture_image(b"picture")
        pins.promote(src)
        pinned = pins.load()[0]
        assert isinstance(pinned, ImageRecord)
        assert pinned.path != src.path
        assert pinned.path.read_bytes() == b"picture"
        history.clear()
        assert pinned.path.exists()

    def test_image_copy_failure(self, pins, tmp_path):
        missing = ImageRecord("[Image: 1 bytes]", tmp_path / "missing.png")
        with pytest.raises(PersistenceError):
            pins.promote(missing)
        assert pins.load() == []


class TestUnpin:
    def test_removes_by_position(self, pins):
        for t in ("a", "b", "c"):
            pins.promote(TextRecord(t))
        removed = pins.unpin(2)
        assert removed.content == "b"
        assert [p.content for p in pins.load()] == ["a", "c"]

    @pytest.mark.parametrize("index", [0, 2, -3])
    def test_out_of_range(self, pins, index):
        pins.promote(TextRecord("only"))
        with pytest.raises(NotFoundError):
            pins.unpin(index)
        assert len(pins.load()) == 1

    def test_unpin_on_empty(self, pins):
        with pytest.raises(NotFoundError, match="empty"):
            pins.unpin(1)

    def test_unpin_deletes_image_copy(self, pins, history):
        pins.promote(history.capture_image(b"pic"))
        blob = pins.load()[0].path
        pins.unpin(1)
        assert not Path(blob).exists()

    def test_unpin_frees_a_slot(self, paths, images, clock):
        store = PinStore(paths.pins, images, ClippyConfig(max_pins=1), clock)
        store.promote(TextRecord("a"))
        store.unpin(1)
        assert store.promote(TextRecord("b")) == 1


class TestDedupDivergence:
    """History dedups against the head only; pins dedup globally."""

    def test_same_sequence_different_outcome(self, history, pins):
        for text in ("x", "y", "x"):
            history.capture_text(text)
        assert len(history.load()) == 3

        pins.promote(TextRecord("x"))
        pins.promote(TextRecord("y"))
        with pytest.raises(AlreadyPinnedError):
            pins.promote(TextRecord("x"))
        assert len(pins.load()) == 2
