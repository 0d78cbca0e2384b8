"""Category routes — public reads, authenticated writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import categories as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.category import CategoryResponse, PricedCategoryResponse

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=list[PricedCategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await controller.list_categories(db)


@router.get("/{category_id}", response_model=PricedCategoryResponse)
async def get_category(
    category_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.get_category(db, category_id)


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_category(db, user_id, body)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_category(db, user_id, category_id, body)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_category(db, user_id, category_id)
