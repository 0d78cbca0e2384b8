"""Review Schemas."""

from datetime import datetime

from pydantic import EmailStr

from trisog.schemas.common import (
    Ratings, RequiredStr, ResponseModel, UpsertModel,
)


class ReviewUpsert(UpsertModel):
    name: RequiredStr
    email: EmailStr
    comment: RequiredStr
    image: RequiredStr
    ratings: Ratings
    experience_id: RequiredStr


class ReviewResponse(ResponseModel):
    id: str
    name: str
    email: str
    comment: str
    image: str
    ratings: dict
    experience_id: str
    created_at: datetime
    user_review_count: int = 0
