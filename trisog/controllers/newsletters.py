"""Newsletter controller — public subscribe/unsubscribe, authenticated listing."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.errors import BusinessRuleError
from trisog.core.validation import parse_payload
from trisog.schemas.newsletter import NewsletterResponse, NewsletterUpsert
from trisog.services.base import commit_changes
from trisog.services.newsletters import NewsletterService


async def list_newsletters(
    db: AsyncSession, user_id: str,
) -> list[NewsletterResponse]:
    require_user_id(user_id)
    newsletters = await NewsletterService(db).list_all()
    return [NewsletterResponse.model_validate(n) for n in newsletters]


async def get_newsletter(
    db: AsyncSession, user_id: str, newsletter_id: str,
) -> NewsletterResponse:
    require_user_id(user_id)
    require_object_id(newsletter_id, "newsletter")
    newsletter = found(
        await NewsletterService(db).get_by_id(newsletter_id),
        "newsletter", newsletter_id,
    )
    return NewsletterResponse.model_validate(newsletter)


async def subscribe(db: AsyncSession, body: Any) -> NewsletterResponse:
    payload = parse_payload(NewsletterUpsert, body)
    service = NewsletterService(db)
    if await service.get_by_email(payload.email) is not None:
        raise BusinessRuleError("This email is already subscribed to the newsletter")
    newsletter = await service.create(email=payload.email)
    await commit_changes(db)
    return NewsletterResponse.model_validate(newsletter)


async def unsubscribe(db: AsyncSession, newsletter_id: str) -> dict:
    require_object_id(newsletter_id, "newsletter")
    service = NewsletterService(db)
    newsletter = found(
        await service.get_by_id(newsletter_id), "newsletter", newsletter_id,
    )
    await service.delete(newsletter)
    await commit_changes(db)
    return DELETED
