"""Booking Schemas — ticket counts and the booking with its experience embedded."""

from datetime import datetime

from trisog.schemas.common import (
    NonNegativeInt, RequiredStr, ResponseModel, UpsertModel, UtcDatetime,
)
from trisog.schemas.experience import ExperienceResponse


class Ticket(UpsertModel):
    adults: NonNegativeInt
    kids: NonNegativeInt
    children: NonNegativeInt


class BookingUpsert(UpsertModel):
    date: UtcDatetime
    time: RequiredStr
    ticket: Ticket
    experience_id: RequiredStr


class BookingResponse(ResponseModel):
    id: str
    date: datetime
    time: str
    ticket: dict
    total_price: float
    experience_id: str
    user_id: str


class BookingWithExperience(BookingResponse):
    experience: ExperienceResponse | None = None
