"""Testimonial Schemas."""

from trisog.schemas.common import RequiredStr, ResponseModel, UpsertModel


class TestimonialUpsert(UpsertModel):
    message: RequiredStr
    author: RequiredStr


class TestimonialResponse(ResponseModel):
    id: str
    message: str
    author: str
