"""Testimonial routes — public reads, authenticated writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import testimonials as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.testimonial import TestimonialResponse

router = APIRouter(prefix="/api/v1/testimonials", tags=["testimonials"])


@router.get("", response_model=list[TestimonialResponse])
async def list_testimonials(db: AsyncSession = Depends(get_db)):
    return await controller.list_testimonials(db)


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
async def get_testimonial(
    testimonial_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.get_testimonial(db, testimonial_id)


@router.post(
    "", response_model=TestimonialResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_testimonial(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_testimonial(db, user_id, body)


@router.put("/{testimonial_id}", response_model=TestimonialResponse)
async def update_testimonial(
    testimonial_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_testimonial(db, user_id, testimonial_id, body)


@router.delete("/{testimonial_id}", response_model=MessageResponse)
async def delete_testimonial(
    testimonial_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_testimonial(db, user_id, testimonial_id)
