"""Review routes — public reads, authenticated writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import reviews as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.review import ReviewResponse

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.get("", response_model=list[ReviewResponse])
async def list_reviews(db: AsyncSession = Depends(get_db)):
    return await controller.list_reviews(db)


@router.get("/experience/{experience_id}", response_model=list[ReviewResponse])
async def list_reviews_by_experience(
    experience_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.list_reviews_by_experience(db, experience_id)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str, db: AsyncSession = Depends(get_db)):
    return await controller.get_review(db, review_id)


@router.post(
    "", response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_review(db, user_id, body)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_review(db, user_id, review_id, body)


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_review(db, user_id, review_id)
