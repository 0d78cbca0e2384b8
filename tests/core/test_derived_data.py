"""Derived Data — verifies travel counters, weather/image snapshots and link diffs."""

from trisog.core.derived_data import (
    decrement_travel_count, image_snapshot, increment_travel_count,
    link_changes, normalize_weather, replace_cover_image,
)
from trisog.core.domain_types import WEATHER_PERIODS


def test_travel_count_increments_from_none():
    assert increment_travel_count(None) == 1
    assert increment_travel_count(4) == 5


def test_travel_count_never_negative():
    assert decrement_travel_count(2) == 1
    assert decrement_travel_count(0) == 0
    assert decrement_travel_count(None) == 0


def test_normalize_weather_fills_every_period():
    snapshot = normalize_weather({"jan_feb": {"min": 1, "max": "12.5"}})
    assert list(snapshot) == list(WEATHER_PERIODS)
    assert snapshot["jan_feb"] == {"min": 1, "max": 12.5}
    assert snapshot["nov_dec"] == {"min": 0, "max": 0}


def test_normalize_weather_discards_garbage():
    snapshot = normalize_weather({"mar_apr": "hot", "may_jun": {"min": "x", "max": True}})
    assert snapshot["mar_apr"] == {"min": 0, "max": 0}
    assert snapshot["may_jun"] == {"min": 0, "max": 0}
    assert normalize_weather(None)["jul_aug"] == {"min": 0, "max": 0}


def test_image_snapshot_is_first_image():
    assert image_snapshot(["a", "b"]) == "a"
    assert image_snapshot([]) is None
    assert image_snapshot(None) is None


def test_replace_cover_image_keeps_gallery_tail():
    assert replace_cover_image(["old", "b", "c"], "new") == ["new", "b", "c"]
    assert replace_cover_image([], "new") == ["new"]


def test_link_changes():
    removed, added = link_changes(["a", "b", "c"], ["c", "d", "a", "d"])
    assert removed == ["b"]
    assert added == ["d"]


def test_link_changes_identical_lists():
    assert link_changes(["a", "b"], ["b", "a"]) == ([], [])
