"""Shared Schema Pieces — base config, annotated field types, nested documents.

Invariants:
    - Every string field is stripped before validation; mandatory strings must be non-empty
    - Datetimes are stored naive in UTC (aware inputs converted, naive inputs taken as UTC)
    - Ratings fields are numbers in [0, 5]
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from trisog.core.domain_types import MAX_RATING


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


RequiredStr = Annotated[str, Field(min_length=1)]
UtcDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]
NonNegativeInt = Annotated[int, Field(ge=0)]
RatingValue = Annotated[float, Field(ge=0, le=MAX_RATING)]


class UpsertModel(BaseModel):
    """Base for request bodies."""
    model_config = ConfigDict(str_strip_whitespace=True)


class ResponseModel(BaseModel):
    """Base for responses built from ORM rows."""
    model_config = ConfigDict(from_attributes=True)


class Ratings(UpsertModel):
    services: RatingValue
    location: RatingValue
    amenities: RatingValue
    prices: RatingValue
    food: RatingValue
    room_comfort_and_quality: RatingValue


class MessageResponse(BaseModel):
    msg: str


class CountResponse(BaseModel):
    count: int
