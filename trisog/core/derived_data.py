"""Derived Data — counters and snapshots kept on categories and destinations.

Invariants:
    - travel_count never goes below zero
    - weather snapshot always has all WEATHER_PERIODS, each with numeric min/max
      (missing or non-numeric values become 0)
    - image snapshot is images[0], or None when a destination has no images
    - link_changes() is set arithmetic over ids; order of the result follows the input

Design Decisions:
    - Pure functions over plain values: controllers read rows, call these,
      and hand the results to services, so the rules are testable without a DB
"""

from typing import Mapping, Sequence

from trisog.core.domain_types import WEATHER_PERIODS


def increment_travel_count(current: int | None) -> int:
    return (current or 0) + 1


def decrement_travel_count(current: int | None) -> int:
    current = current or 0
    return current - 1 if current > 0 else 0


def _as_number(value: object) -> float:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0
    return 0


def normalize_weather(weather: Mapping[str, object] | None) -> dict[str, dict[str, float]]:
    """Rebuild a full weather document from whatever is stored."""
    weather = weather if isinstance(weather, Mapping) else {}
    snapshot = {}
    for period in WEATHER_PERIODS:
        raw = weather.get(period)
        raw = raw if isinstance(raw, Mapping) else {}
        snapshot[period] = {
            "min": _as_number(raw.get("min", 0)),
            "max": _as_number(raw.get("max", 0)),
        }
    return snapshot


def image_snapshot(images: Sequence[str] | None) -> str | None:
    return images[0] if images else None


def replace_cover_image(images: Sequence[str] | None, cover: str) -> list[str]:
    """New cover goes first, the rest of the gallery is kept."""
    return [cover, *list(images or [])[1:]]


def link_changes(
    old_ids: Sequence[str], new_ids: Sequence[str],
) -> tuple[list[str], list[str]]:
    """Return (removed, added) ids between two link lists."""
    old_set, new_set = set(old_ids), set(new_ids)
    removed = [i for i in dict.fromkeys(old_ids) if i not in new_set]
    added = [i for i in dict.fromkeys(new_ids) if i not in old_set]
    return removed, added
