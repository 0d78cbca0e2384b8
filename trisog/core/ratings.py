"""Ratings — pure aggregation of per-review ratings into experience ratings.

Invariants:
    - Every ratings dict produced here has exactly RATING_FIELDS as keys
    - Each field is clamped to [0, MAX_RATING]; non-numeric values count as 0
    - aggregate_ratings([]) is all zeros (an experience with no reviews)
    - calculate_average_rating() is the mean of the six normalized fields
"""

from typing import Iterable, Mapping

from trisog.core.domain_types import MAX_RATING, RATING_FIELDS


def empty_ratings() -> dict[str, float]:
    return {name: 0 for name in RATING_FIELDS}


def normalize_rating(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, min(value, MAX_RATING))


def normalize_ratings(ratings: Mapping[str, object] | None) -> dict[str, float]:
    """Project an arbitrary mapping onto RATING_FIELDS."""
    ratings = ratings or {}
    return {name: normalize_rating(ratings.get(name)) for name in RATING_FIELDS}


def calculate_average_rating(ratings: Mapping[str, object] | None) -> float:
    if not ratings:
        return 0
    normalized = normalize_ratings(ratings)
    return sum(normalized.values()) / len(RATING_FIELDS)


def aggregate_ratings(
    review_ratings: Iterable[Mapping[str, object] | None],
) -> tuple[dict[str, float], int]:
    """Per-field mean over all reviews, plus the review count."""
    totals = empty_ratings()
    count = 0
    for ratings in review_ratings:
        normalized = normalize_ratings(ratings)
        for name in RATING_FIELDS:
            totals[name] += normalized[name]
        count += 1
    if count == 0:
        return totals, 0
    return {name: totals[name] / count for name in RATING_FIELDS}, count
