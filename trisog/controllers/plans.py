"""Plan controller."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.validation import parse_payload
from trisog.schemas.plan import PlanResponse, PlanUpsert
from trisog.services.base import commit_changes
from trisog.services.plans import PlanService


async def list_plans(db: AsyncSession) -> list[PlanResponse]:
    return [PlanResponse.model_validate(p) for p in await PlanService(db).list_all()]


async def get_plan(db: AsyncSession, plan_id: str) -> PlanResponse:
    require_object_id(plan_id, "plan")
    plan = found(await PlanService(db).get_by_id(plan_id), "plan", plan_id)
    return PlanResponse.model_validate(plan)


async def create_plan(db: AsyncSession, user_id: str, body: Any) -> PlanResponse:
    require_user_id(user_id)
    payload = parse_payload(PlanUpsert, body)
    plan = await PlanService(db).create(**payload.model_dump())
    await commit_changes(db)
    return PlanResponse.model_validate(plan)


async def update_plan(
    db: AsyncSession, user_id: str, plan_id: str, body: Any,
) -> PlanResponse:
    require_user_id(user_id)
    require_object_id(plan_id, "plan")
    service = PlanService(db)
    plan = found(await service.get_by_id(plan_id), "plan", plan_id)
    payload = parse_payload(PlanUpsert, body)
    await service.update(plan, **payload.model_dump())
    await commit_changes(db)
    return PlanResponse.model_validate(plan)


async def delete_plan(db: AsyncSession, user_id: str, plan_id: str) -> dict:
    require_user_id(user_id)
    require_object_id(plan_id, "plan")
    service = PlanService(db)
    plan = found(await service.get_by_id(plan_id), "plan", plan_id)
    await service.delete(plan)
    await commit_changes(db)
    return DELETED
