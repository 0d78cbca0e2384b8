"""Favorite routes — the caller's own favorites list."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import favorites as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.favorite import FavoriteResponse

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.get("", response_model=FavoriteResponse)
async def get_favorites(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.get_favorites(db, user_id)


@router.post(
    "", response_model=FavoriteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_favorite(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.add_favorite(db, user_id, body)


@router.delete("/{experience_id}", response_model=MessageResponse)
async def remove_favorite(
    experience_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.remove_favorite(db, user_id, experience_id)
