"""Booking routes — every endpoint requires a bearer token."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import bookings as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.booking import BookingResponse, BookingWithExperience
from trisog.schemas.common import CountResponse, MessageResponse

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingWithExperience])
async def list_bookings(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.list_bookings(db, user_id)


@router.get("/stats/count", response_model=CountResponse)
async def count_bookings(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.count_bookings(db, user_id)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.get_booking(db, user_id, booking_id)


@router.post(
    "", response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_booking(db, user_id, body)


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_booking(db, user_id, booking_id, body)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_booking(db, user_id, booking_id)
