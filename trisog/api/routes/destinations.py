"""Destination routes — public reads, authenticated writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import destinations as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.destination import DestinationResponse

router = APIRouter(prefix="/api/v1/destinations", tags=["destinations"])


@router.get("", response_model=list[DestinationResponse])
async def list_destinations(db: AsyncSession = Depends(get_db)):
    return await controller.list_destinations(db)


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(
    destination_id: str, db: AsyncSession = Depends(get_db),
):
    return await controller.get_destination(db, destination_id)


@router.post(
    "", response_model=DestinationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_destination(
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.create_destination(db, user_id, body)


@router.put("/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: str,
    body: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.update_destination(db, user_id, destination_id, body)


@router.delete("/{destination_id}", response_model=MessageResponse)
async def delete_destination(
    destination_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.delete_destination(db, user_id, destination_id)
