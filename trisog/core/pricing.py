"""Pricing — booking totals and category "from" prices.

Invariants:
    - Children pay half price; adults and kids pay the full default price
    - category_from_prices() only lists categories that appear on at least one experience
"""

from typing import Iterable, Mapping, Sequence

CHILD_PRICE_FACTOR = 0.5


def booking_total_price(default_price: float, ticket: Mapping[str, int]) -> float:
    seats = (
        ticket.get("adults", 0)
        + ticket.get("kids", 0)
        + ticket.get("children", 0) * CHILD_PRICE_FACTOR
    )
    return default_price * seats


def category_from_prices(
    experiences: Iterable[tuple[Sequence[str], float]],
) -> dict[str, float]:
    """Lowest default_price per category id, from (category_ids, price) pairs."""
    lowest: dict[str, float] = {}
    for category_ids, price in experiences:
        for category_id in category_ids:
            if category_id not in lowest or price < lowest[category_id]:
                lowest[category_id] = price
    return lowest
