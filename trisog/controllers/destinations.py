"""Destination controller.

Invariants:
    - Create stores images=[image], image=image and travel_count=0
    - Update keeps the gallery tail and travel_count: images=[image, *old[1:]]
    - A destination still referenced by experiences cannot be deleted
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.derived_data import (
    image_snapshot, normalize_weather, replace_cover_image,
)
from trisog.core.errors import BusinessRuleError
from trisog.core.validation import parse_payload
from trisog.schemas.destination import DestinationResponse, DestinationUpsert
from trisog.services.base import commit_changes
from trisog.services.destinations import DestinationService
from trisog.services.experiences import ExperienceService


async def list_destinations(db: AsyncSession) -> list[DestinationResponse]:
    destinations = await DestinationService(db).list_all()
    return [DestinationResponse.model_validate(d) for d in destinations]


async def get_destination(
    db: AsyncSession, destination_id: str,
) -> DestinationResponse:
    require_object_id(destination_id, "destination")
    destination = found(
        await DestinationService(db).get_by_id(destination_id),
        "destination", destination_id,
    )
    return DestinationResponse.model_validate(destination)


async def create_destination(
    db: AsyncSession, user_id: str, body: Any,
) -> DestinationResponse:
    require_user_id(user_id)
    payload = parse_payload(DestinationUpsert, body)
    fields = payload.model_dump(exclude={"image", "weather"})
    images = [payload.image]
    destination = await DestinationService(db).create(
        **fields,
        weather=normalize_weather(payload.weather.model_dump()),
        images=images,
        image=image_snapshot(images),
        travel_count=0,
    )
    await commit_changes(db)
    return DestinationResponse.model_validate(destination)


async def update_destination(
    db: AsyncSession, user_id: str, destination_id: str, body: Any,
) -> DestinationResponse:
    require_user_id(user_id)
    require_object_id(destination_id, "destination")
    service = DestinationService(db)
    destination = found(
        await service.get_by_id(destination_id), "destination", destination_id,
    )
    payload = parse_payload(DestinationUpsert, body)
    fields = payload.model_dump(exclude={"image", "weather"})
    images = replace_cover_image(destination.images, payload.image)
    await service.update(
        destination,
        **fields,
        weather=normalize_weather(payload.weather.model_dump()),
        images=images,
        image=image_snapshot(images),
    )
    await commit_changes(db)
    return DestinationResponse.model_validate(destination)


async def delete_destination(
    db: AsyncSession, user_id: str, destination_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(destination_id, "destination")
    service = DestinationService(db)
    destination = found(
        await service.get_by_id(destination_id), "destination", destination_id,
    )
    if await ExperienceService(db).count_by_destination(destination_id):
        raise BusinessRuleError(
            "The destination cannot be deleted while experiences are linked to it",
        )
    await service.delete(destination)
    await commit_changes(db)
    return DELETED
