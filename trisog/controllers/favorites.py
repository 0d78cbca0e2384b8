"""Favorites controller — one ordered experience-id list per user.

Invariants:
    - The list is created on the first add
    - An experience appears at most once in a list
"""

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import found, require_object_id, require_user_id
from trisog.core.errors import BusinessRuleError, ReferenceNotFoundError
from trisog.core.validation import parse_payload
from trisog.schemas.favorite import FavoriteResponse, FavoriteUpsert
from trisog.services.base import commit_changes
from trisog.services.experiences import ExperienceService
from trisog.services.favorites import FavoriteService

_UNKNOWN_EXPERIENCE = (
    "The specified experience does not exist, please choose a valid experience"
)


async def get_favorites(db: AsyncSession, user_id: str) -> FavoriteResponse:
    require_user_id(user_id)
    favorite = found(
        await FavoriteService(db).get_by_user(user_id), "favorite", user_id,
    )
    return FavoriteResponse.model_validate(favorite)


async def add_favorite(
    db: AsyncSession, user_id: str, body,
) -> FavoriteResponse:
    require_user_id(user_id)
    payload = parse_payload(FavoriteUpsert, body)
    service = FavoriteService(db)
    favorite = await service.get_by_user(user_id)
    if favorite is not None and payload.experience_id in favorite.experiences_id:
        raise BusinessRuleError(
            "The specified experience already exists in the favorites list",
        )
    require_object_id(payload.experience_id, "experience")
    if await ExperienceService(db).get_by_id(payload.experience_id) is None:
        raise ReferenceNotFoundError(_UNKNOWN_EXPERIENCE)

    if favorite is None:
        favorite = await service.create(
            user_id=user_id, experiences_id=[payload.experience_id],
        )
    else:
        await service.update(
            favorite,
            experiences_id=[*favorite.experiences_id, payload.experience_id],
        )
    await commit_changes(db)
    return FavoriteResponse.model_validate(favorite)


async def remove_favorite(
    db: AsyncSession, user_id: str, experience_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(experience_id, "experience")
    service = FavoriteService(db)
    favorite = found(await service.get_by_user(user_id), "favorite", user_id)
    if experience_id not in favorite.experiences_id:
        raise ReferenceNotFoundError(_UNKNOWN_EXPERIENCE)
    await service.update(
        favorite,
        experiences_id=[i for i in favorite.experiences_id if i != experience_id],
    )
    await commit_changes(db)
    return {"msg": "Successfully deleted from favorites"}
