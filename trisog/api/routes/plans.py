"""Plan routes — public reads, authenticated writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import plans as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.plan import PlanResponse

router = APIRouter(prefix="/api/v1/plans", tags=["plans"])


@router.get("", response_model=list[PlanResponse])
async def list_plans(db: AsyncSession = Depends(get_db)):
    return await controller.list_plans(db)


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(
    plan_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.get_plan(db, plan_id)


@router.post(
    "", response_model=PlanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_plan(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_plan(db, user_id, body)


@router.put("/{plan_id}", response_model=PlanResponse)
async def update_plan(
    plan_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_plan(db, user_id, plan_id, body)


@router.delete("/{plan_id}", response_model=MessageResponse)
async def delete_plan(
    plan_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_plan(db, user_id, plan_id)
