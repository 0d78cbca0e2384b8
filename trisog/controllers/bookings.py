"""Booking controller — ownership checks and server-side pricing.

Invariants:
    - total_price = default_price × (adults + kids + 0.5 × children), never taken from the client
    - user_id always comes from the bearer token
    - Only the owner may read, update or delete a booking (403 otherwise)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.errors import ErrorContext, ForbiddenError, ReferenceNotFoundError
from trisog.core.pricing import booking_total_price
from trisog.core.validation import parse_payload
from trisog.models.booking import Booking
from trisog.schemas.booking import (
    BookingResponse, BookingUpsert, BookingWithExperience,
)
from trisog.schemas.common import CountResponse
from trisog.schemas.experience import ExperienceResponse
from trisog.services.base import commit_changes
from trisog.services.bookings import BookingService
from trisog.services.experiences import ExperienceService


def _check_owner(booking: Booking, user_id: str, action: str) -> None:
    if booking.user_id != user_id:
        raise ForbiddenError(
            f"You can only {action} bookings associated with your own account",
            ErrorContext(resource="booking", resource_id=booking.id, user_id=user_id),
        )


async def _priced_fields(db: AsyncSession, payload: BookingUpsert) -> dict:
    require_object_id(payload.experience_id, "experience")
    experience = await ExperienceService(db).get_by_id(payload.experience_id)
    if experience is None:
        raise ReferenceNotFoundError(
            "The specified experience does not exist, please choose a valid experience",
        )
    ticket = payload.ticket.model_dump()
    return {
        "date": payload.date,
        "time": payload.time,
        "ticket": ticket,
        "experience_id": payload.experience_id,
        "total_price": booking_total_price(experience.default_price, ticket),
    }


async def list_bookings(
    db: AsyncSession, user_id: str,
) -> list[BookingWithExperience]:
    require_user_id(user_id)
    bookings = await BookingService(db).list_by_user(user_id)
    experiences = await ExperienceService(db).get_many(
        b.experience_id for b in bookings
    )
    result = []
    for booking in bookings:
        experience = experiences.get(booking.experience_id)
        result.append(BookingWithExperience(
            **BookingResponse.model_validate(booking).model_dump(),
            experience=(
                ExperienceResponse.model_validate(experience)
                if experience is not None else None
            ),
        ))
    return result


async def count_bookings(db: AsyncSession, user_id: str) -> CountResponse:
    require_user_id(user_id)
    return CountResponse(count=await BookingService(db).count_all())


async def get_booking(
    db: AsyncSession, user_id: str, booking_id: str,
) -> BookingResponse:
    require_user_id(user_id)
    require_object_id(booking_id, "booking")
    booking = found(
        await BookingService(db).get_by_id(booking_id), "booking", booking_id,
    )
    _check_owner(booking, user_id, "view")
    return BookingResponse.model_validate(booking)


async def create_booking(
    db: AsyncSession, user_id: str, body: Any,
) -> BookingResponse:
    require_user_id(user_id)
    payload = parse_payload(BookingUpsert, body)
    fields = await _priced_fields(db, payload)
    booking = await BookingService(db).create(**fields, user_id=user_id)
    await commit_changes(db)
    return BookingResponse.model_validate(booking)


async def update_booking(
    db: AsyncSession, user_id: str, booking_id: str, body: Any,
) -> BookingResponse:
    require_user_id(user_id)
    require_object_id(booking_id, "booking")
    service = BookingService(db)
    booking = found(await service.get_by_id(booking_id), "booking", booking_id)
    _check_owner(booking, user_id, "update")
    payload = parse_payload(BookingUpsert, body)
    fields = await _priced_fields(db, payload)
    await service.update(booking, **fields)
    await commit_changes(db)
    return BookingResponse.model_validate(booking)


async def delete_booking(
    db: AsyncSession, user_id: str, booking_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(booking_id, "booking")
    service = BookingService(db)
    booking = found(await service.get_by_id(booking_id), "booking", booking_id)
    _check_owner(booking, user_id, "delete")
    await service.delete(booking)
    await commit_changes(db)
    return DELETED
