"""Testimonial controller."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.validation import parse_payload
from trisog.schemas.testimonial import TestimonialResponse, TestimonialUpsert
from trisog.services.base import commit_changes
from trisog.services.testimonials import TestimonialService


async def list_testimonials(db: AsyncSession) -> list[TestimonialResponse]:
    testimonials = await TestimonialService(db).list_all()
    return [TestimonialResponse.model_validate(t) for t in testimonials]


async def get_testimonial(
    db: AsyncSession, testimonial_id: str,
) -> TestimonialResponse:
    require_object_id(testimonial_id, "testimonial")
    testimonial = found(
        await TestimonialService(db).get_by_id(testimonial_id),
        "testimonial", testimonial_id,
    )
    return TestimonialResponse.model_validate(testimonial)


async def create_testimonial(
    db: AsyncSession, user_id: str, body: Any,
) -> TestimonialResponse:
    require_user_id(user_id)
    payload = parse_payload(TestimonialUpsert, body)
    testimonial = await TestimonialService(db).create(**payload.model_dump())
    await commit_changes(db)
    return TestimonialResponse.model_validate(testimonial)


async def update_testimonial(
    db: AsyncSession, user_id: str, testimonial_id: str, body: Any,
) -> TestimonialResponse:
    require_user_id(user_id)
    require_object_id(testimonial_id, "testimonial")
    service = TestimonialService(db)
    testimonial = found(
        await service.get_by_id(testimonial_id), "testimonial", testimonial_id,
    )
    payload = parse_payload(TestimonialUpsert, body)
    await service.update(testimonial, **payload.model_dump())
    await commit_changes(db)
    return TestimonialResponse.model_validate(testimonial)


async def delete_testimonial(
    db: AsyncSession, user_id: str, testimonial_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(testimonial_id, "testimonial")
    service = TestimonialService(db)
    testimonial = found(
        await service.get_by_id(testimonial_id), "testimonial", testimonial_id,
    )
    await service.delete(testimonial)
    await commit_changes(db)
    return DELETED
