"""Newsletter routes — public subscribe/unsubscribe, authenticated listing."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers import newsletters as controller
from trisog.infrastructure.auth import get_current_user_id
from trisog.infrastructure.database import get_db
from trisog.schemas.common import MessageResponse
from trisog.schemas.newsletter import NewsletterResponse

router = APIRouter(prefix="/api/v1/newsletters", tags=["newsletters"])


@router.get("", response_model=list[NewsletterResponse])
async def list_newsletters(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.list_newsletters(db, user_id)


@router.get("/{newsletter_id}", response_model=NewsletterResponse)
async def get_newsletter(
    newsletter_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await controller.get_newsletter(db, user_id, newsletter_id)


@router.post(
    "", response_model=NewsletterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(body: Any = Body(None), db: AsyncSession = Depends(get_db)):
    return await controller.subscribe(db, body)


@router.delete("/{newsletter_id}", response_model=MessageResponse)
async def unsubscribe(newsletter_id: str, db: AsyncSession = Depends(get_db)):
    return await controller.unsubscribe(db, newsletter_id)
