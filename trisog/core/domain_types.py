"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ObjectId wraps 24-char lowercase hex strings, UserId wraps token subjects
    - All closed vocabularies (continents, months, sort order) encoded as Enums
    - WEATHER_PERIODS and RATING_FIELDS are the single source of field order

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ObjectId = NewType("ObjectId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Continent(str, Enum):
    """Continents accepted for destinations (first letter capitalized)."""
    AFRICA = "Africa"
    AMERICA = "America"
    ANTARCTICA = "Antarctica"
    ASIA = "Asia"
    EUROPE = "Europe"
    OCEANIA = "Oceania"


class TravelMonth(str, Enum):
    """Three-letter month names used by time_to_travel."""
    JAN = "Jan"
    FEB = "Feb"
    MAR = "Mar"
    APR = "Apr"
    MAY = "May"
    JUN = "Jun"
    JUL = "Jul"
    AUG = "Aug"
    SEP = "Sep"
    OCT = "Oct"
    NOV = "Nov"
    DEC = "Dec"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ─── Field Vocabularies ──────────────────────────────────────────

WEATHER_PERIODS: tuple[str, ...] = (
    "jan_feb", "mar_apr", "may_jun", "jul_aug", "sep_oct", "nov_dec",
)

RATING_FIELDS: tuple[str, ...] = (
    "services", "location", "amenities", "prices", "food",
    "room_comfort_and_quality",
)

MAX_RATING = 5

MAP_LINK_PREFIX = "https://www.google.com/maps/embed"

IMAGE_URL_PREFIXES: tuple[str, ...] = (
    "https://firebasestorage.googleapis.com",
    "https://graph.facebook.com",
    "https://avatars.githubusercontent.com",
    "https://lh3.googleusercontent.com",
)
