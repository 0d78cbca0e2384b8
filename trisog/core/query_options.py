"""Experience Query Options — parse listing query strings into typed filters.

Invariants:
    - Pure: takes a mapping of raw query strings, returns QueryOptions or raises InvalidQueryError
    - page and limit are always >= 1 (defaults 1 and 10); integer parameters stay within 32 bits
    - price must be a finite number >= 0
    - Sorting is restricted to SORTABLE_FIELDS; default title/desc
    - Filters are optional; an absent parameter never produces a filter

Design Decisions:
    - Storage-agnostic: QueryOptions carries plain values, the service translates
      them into SQL so this module stays free of SQLAlchemy
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping

from trisog.core.domain_types import MAX_RATING, SortOrder
from trisog.core.errors import InvalidQueryError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT_BY = "title"
MAX_INT_PARAM = 2**31 - 1

SORTABLE_FIELDS: frozenset[str] = frozenset({
    "title", "city", "default_price", "start_date", "end_date", "duration",
    "max_people", "min_age", "rating", "review_count",
})


@dataclass(frozen=True)
class ExperienceFilters:
    """Optional listing filters; None means 'not filtered'."""
    title: str | None = None
    max_price: float | None = None
    category_ids: tuple[str, ...] = ()
    destination_ids: tuple[str, ...] = ()
    min_rating: int | None = None
    on_date: datetime | None = None
    guests: int | None = None


@dataclass(frozen=True)
class QueryOptions:
    filters: ExperienceFilters = field(default_factory=ExperienceFilters)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = DEFAULT_SORT_BY
    order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def create_query_options(query: Mapping[str, str]) -> QueryOptions:
    """Build QueryOptions from raw query parameters.

    Raises InvalidQueryError with the message of the first offending parameter.
    """
    page = _parse_int(query.get("page"), DEFAULT_PAGE, minimum=1, name="page")
    limit = _parse_int(query.get("limit"), DEFAULT_LIMIT, minimum=1, name="limit")

    max_price = None
    if query.get("price"):
        try:
            max_price = float(query["price"])
        except ValueError:
            raise InvalidQueryError("Invalid price value")
        if not math.isfinite(max_price) or max_price < 0:
            raise InvalidQueryError("Invalid price value")

    min_rating = None
    if query.get("rating"):
        min_rating = _parse_int(query["rating"], 0, minimum=0, name="rating")
        if min_rating > MAX_RATING:
            raise InvalidQueryError("Invalid rating value")

    on_date = None
    if query.get("date"):
        on_date = _parse_date(query["date"])

    guests = None
    if query.get("guests"):
        guests = _parse_int(query["guests"], 1, minimum=1, name="guests")

    sort_by = query.get("sortBy") or DEFAULT_SORT_BY
    if sort_by not in SORTABLE_FIELDS:
        raise InvalidQueryError("Invalid sortBy value")
    try:
        order = SortOrder(query.get("order") or SortOrder.DESC.value)
    except ValueError:
        raise InvalidQueryError("Invalid order value")

    filters = ExperienceFilters(
        title=query.get("title") or None,
        max_price=max_price,
        category_ids=_split_csv(query.get("categoriesId")),
        destination_ids=_split_csv(query.get("destinationsId")),
        min_rating=min_rating,
        on_date=on_date,
        guests=guests,
    )
    return QueryOptions(
        filters=filters, page=page, limit=limit, sort_by=sort_by, order=order,
    )


def _parse_int(raw: str | None, default: int, *, minimum: int, name: str) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidQueryError(f"Invalid {name} value")
    if value < minimum or value > MAX_INT_PARAM:
        raise InvalidQueryError(f"Invalid {name} value")
    return value


def _parse_date(raw: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidQueryError("Invalid date value")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _split_csv(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())
