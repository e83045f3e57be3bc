"""
Unit tests for match trackers.
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent.parent))

from src.match import match_tracker
from src.match.match_tracker import BitMaskTracker, ListTracker, build_tracker


class TestBuildTracker:
    """Test cases for tracker selection."""

    def test_small_capacity_uses_bitmask(self):
        """Capacities up to the inline limit use the bitmask tracker."""
        assert isinstance(build_tracker(0), BitMaskTracker)
        assert isinstance(build_tracker(1), BitMaskTracker)
        assert isinstance(build_tracker(128), BitMaskTracker)

    def test_large_capacity_uses_list(self):
        """Capacities above the inline limit use the list tracker."""
        tracker = build_tracker(129)
        assert isinstance(tracker, ListTracker)
        assert len(tracker) == 129

    def test_threshold_read_at_call_time(self, monkeypatch):
        """Patching the inline limit changes the selected representation."""
        monkeypatch.setattr(match_tracker, "INLINE_CAPACITY", 4)
        assert isinstance(build_tracker(4), BitMaskTracker)
        assert isinstance(build_tracker(5), ListTracker)

    def test_negative_capacity_rejected(self):
        """Negative capacities raise ValueError."""
        with pytest.raises(ValueError):
            BitMaskTracker(-1)
        with pytest.raises(ValueError):
            ListTracker(-1)


@pytest.mark.parametrize("tracker_cls", [BitMaskTracker, ListTracker])
class TestTrackerBehaviour:
    """Both representations behave as the same positional set."""

    def test_starts_unmarked(self, tracker_cls):
        tracker = tracker_cls(200)
        assert not any(tracker.get(i) for i in range(200))
        assert tracker.count() == 0

    def test_set_and_get(self, tracker_cls):
        tracker = tracker_cls(200)
        for index in (0, 63, 64, 127, 128, 199):
            tracker.set_true(index)

        marked = [i for i in range(200) if tracker.get(i)]
        assert marked == [0, 63, 64, 127, 128, 199]
        assert tracker.count() == 6

    def test_set_is_idempotent(self, tracker_cls):
        tracker = tracker_cls(10)
        tracker.set_true(3)
        tracker.set_true(3)
        assert tracker.get(3)
        assert tracker.count() == 1

    def test_capacity(self, tracker_cls):
        tracker = tracker_cls(17)
        assert tracker.capacity == 17
        assert len(tracker) == 17


if __name__ == "__main__":
    pytest.main([__file__])
