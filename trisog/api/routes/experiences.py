"""Experience routes — paginated listing with query options, authenticated writes.

Invariants:
    - /favorites is declared before /{experience_id} so it is not read as an id
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import experiences as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.experience import (
    ExperienceDetail, ExperienceResponse, PaginatedExperiences,
)

router = APIRouter(prefix="/api/v1/experiences", tags=["experiences"])


@router.get("", response_model=PaginatedExperiences)
async def list_experiences(request: Request, db: AsyncSession = Depends(get_db)):
    """Query: page, limit, title, price, categoriesId, destinationsId,
    rating, date, guests, sortBy, order."""
    return await controller.list_experiences(db, dict(request.query_params))


@router.get("/favorites", response_model=PaginatedExperiences)
async def list_favorite_experiences(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.list_favorite_experiences(
        db, user_id, dict(request.query_params),
    )


@router.get("/{experience_id}", response_model=ExperienceDetail)
async def get_experience(
    experience_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.get_experience(db, experience_id)


@router.post(
    "", response_model=ExperienceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_experience(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_experience(db, user_id, body)


@router.put("/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    experience_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_experience(db, user_id, experience_id, body)


@router.delete("/{experience_id}", response_model=MessageResponse)
async def delete_experience(
    experience_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_experience(db, user_id, experience_id)
