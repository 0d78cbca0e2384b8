"""Experience controller — link validation, expansion and derived-data upkeep.

Invariants:
    - Category, plan and destination ids are checked in that order, each for
      shape (400) and then existence (400)
    - Create/delete move travel_count on linked categories and destination by one
      (never below zero) and refresh the destination's weather and image snapshot
    - Update preserves ratings and review_count and moves counters only for
      links that changed
    - Expanded reads fail with 404 when a stored link no longer resolves
"""

import logging
import math
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.derived_data import (
    decrement_travel_count, image_snapshot, increment_travel_count,
    link_changes, normalize_weather,
)
from trisog.core.errors import (
    ErrorContext, InvalidIdentifierError, ReferenceNotFoundError,
    ResourceNotFoundError,
)
from trisog.core.identifiers import is_valid_object_id
from trisog.core.query_options import QueryOptions, create_query_options
from trisog.core.ratings import empty_ratings
from trisog.core.validation import parse_payload
from trisog.models.destination import Destination
from trisog.models.experience import Experience
from trisog.schemas.category import CategoryResponse
from trisog.schemas.destination import DestinationResponse
from trisog.schemas.experience import (
    ExperienceDetail, ExperienceResponse, ExperienceUpsert, PaginatedExperiences,
)
from trisog.schemas.plan import PlanResponse
from trisog.services.base import commit_changes
from trisog.services.categories import CategoryService
from trisog.services.destinations import DestinationService
from trisog.services.experiences import ExperienceService
from trisog.services.favorites import FavoriteService
from trisog.services.plans import PlanService

logger = logging.getLogger(__name__)


# ─── Reads ───────────────────────────────────────────────────────

async def list_experiences(
    db: AsyncSession, query: Mapping[str, str],
) -> PaginatedExperiences:
    options = create_query_options(query)
    return await _page(db, options)


async def list_favorite_experiences(
    db: AsyncSession, user_id: str, query: Mapping[str, str],
) -> PaginatedExperiences:
    options = create_query_options(query)
    require_user_id(user_id)
    favorite = await FavoriteService(db).get_by_user(user_id)
    ids = favorite.experiences_id if favorite else []
    return await _page(db, options, only_ids=ids)


async def get_experience(
    db: AsyncSession, experience_id: str,
) -> ExperienceDetail:
    require_object_id(experience_id, "experience")
    experience = found(
        await ExperienceService(db).get_by_id(experience_id),
        "experience", experience_id,
    )
    [detail] = await _expand(db, [experience], dangling_suffix="")
    return detail


async def _page(
    db: AsyncSession, options: QueryOptions, only_ids=None,
) -> PaginatedExperiences:
    experiences, total = await ExperienceService(db).list_page(
        options, only_ids=only_ids,
    )
    return PaginatedExperiences(
        page=options.page,
        limit=options.limit,
        total_pages=math.ceil(total / options.limit),
        total_experiences=total,
        experiences=await _expand(db, experiences),
    )


async def _expand(
    db: AsyncSession, experiences: list[Experience], dangling_suffix: str | None = None,
) -> list[ExperienceDetail]:
    """Replace link ids with the linked objects, batch-loading each kind once."""
    categories = await CategoryService(db).get_many(
        cid for e in experiences for cid in e.categories_id
    )
    plans = await PlanService(db).get_many(
        pid for e in experiences for pid in e.plans_id
    )
    destinations = await DestinationService(db).get_many(
        e.destination_id for e in experiences
    )

    def missing(kind: str, experience: Experience) -> ResourceNotFoundError:
        suffix = (
            f" for experience ID {experience.id}"
            if dangling_suffix is None else dangling_suffix
        )
        logger.warning(
            f"Experience links a missing {kind}",
            extra={"resource": "experience", "resource_id": experience.id},
        )
        return ResourceNotFoundError(
            f"No {kind} found{suffix}",
            ErrorContext(resource="experience", resource_id=experience.id),
        )

    details = []
    for experience in experiences:
        if any(cid not in categories for cid in experience.categories_id):
            raise missing("category", experience)
        if any(pid not in plans for pid in experience.plans_id):
            raise missing("plan", experience)
        destination = destinations.get(experience.destination_id)
        if destination is None:
            raise missing("destination", experience)
        base = ExperienceResponse.model_validate(experience).model_dump(
            exclude={"categories_id", "plans_id", "destination_id"},
        )
        details.append(ExperienceDetail(
            **base,
            categories=[
                CategoryResponse.model_validate(categories[cid])
                for cid in experience.categories_id
            ],
            plans=[
                PlanResponse.model_validate(plans[pid])
                for pid in experience.plans_id
            ],
            destination=DestinationResponse.model_validate(destination),
        ))
    return details


# ─── Writes ──────────────────────────────────────────────────────

async def _resolve_links(
    db: AsyncSession, payload: ExperienceUpsert,
) -> tuple[dict, Destination]:
    """Check every referenced id; returns (categories by id, destination)."""
    category_service = CategoryService(db)
    categories = {}
    for category_id in payload.categories_id:
        if not is_valid_object_id(category_id):
            raise InvalidIdentifierError(f"Invalid category ID {category_id}")
        category = await category_service.get_by_id(category_id)
        if category is None:
            raise ReferenceNotFoundError(
                f"The specified category ID {category_id} does not exist, "
                "please choose a valid category",
            )
        categories[category_id] = category

    plan_service = PlanService(db)
    for plan_id in payload.plans_id:
        if not is_valid_object_id(plan_id):
            raise InvalidIdentifierError(f"Invalid plan ID: {plan_id}")
        if await plan_service.get_by_id(plan_id) is None:
            raise ReferenceNotFoundError(
                f"The specified plan ID {plan_id} does not exist, "
                "please choose a valid plan",
            )

    if not is_valid_object_id(payload.destination_id):
        raise InvalidIdentifierError("Invalid destination ID")
    destination = await DestinationService(db).get_by_id(payload.destination_id)
    if destination is None:
        raise ReferenceNotFoundError(
            "The specified destination does not exist, "
            "please choose a valid destination",
        )
    return categories, destination


def _refresh_snapshot(destination: Destination) -> None:
    destination.weather = normalize_weather(destination.weather)
    destination.image = image_snapshot(destination.images)


def _experience_fields(payload: ExperienceUpsert) -> dict:
    fields = payload.model_dump(
        exclude={"custom_prices", "categories_id", "plans_id"},
    )
    fields["custom_prices"] = payload.custom_prices_document()
    return fields


async def create_experience(
    db: AsyncSession, user_id: str, body: Any,
) -> ExperienceResponse:
    require_user_id(user_id)
    payload = parse_payload(ExperienceUpsert, body)
    categories, destination = await _resolve_links(db, payload)

    experience = await ExperienceService(db).create(
        **_experience_fields(payload),
        categories_id=payload.categories_id,
        plans_id=payload.plans_id,
        ratings=empty_ratings(),
        rating=0,
        review_count=0,
    )

    for category in categories.values():
        category.travel_count = increment_travel_count(category.travel_count)
    destination.travel_count = increment_travel_count(destination.travel_count)
    _refresh_snapshot(destination)

    await commit_changes(db)
    logger.info(
        "Experience created",
        extra={"resource": "experience", "resource_id": experience.id, "user_id": user_id},
    )
    return ExperienceResponse.model_validate(experience)


async def update_experience(
    db: AsyncSession, user_id: str, experience_id: str, body: Any,
) -> ExperienceResponse:
    require_user_id(user_id)
    require_object_id(experience_id, "experience")
    service = ExperienceService(db)
    experience = found(
        await service.get_by_id(experience_id), "experience", experience_id,
    )
    payload = parse_payload(ExperienceUpsert, body)
    categories, destination = await _resolve_links(db, payload)

    removed, added = link_changes(experience.categories_id, payload.categories_id)
    dropped = await CategoryService(db).get_many(removed)
    for category in dropped.values():
        category.travel_count = decrement_travel_count(category.travel_count)
    for category_id in added:
        category = categories[category_id]
        category.travel_count = increment_travel_count(category.travel_count)

    if experience.destination_id != destination.id:
        previous = await DestinationService(db).get_by_id(experience.destination_id)
        if previous is not None:
            previous.travel_count = decrement_travel_count(previous.travel_count)
            _refresh_snapshot(previous)
        destination.travel_count = increment_travel_count(destination.travel_count)
    _refresh_snapshot(destination)

    await service.update(
        experience,
        **_experience_fields(payload),
        categories_id=payload.categories_id,
        plans_id=payload.plans_id,
    )
    await commit_changes(db)
    return ExperienceResponse.model_validate(experience)


async def delete_experience(
    db: AsyncSession, user_id: str, experience_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(experience_id, "experience")
    service = ExperienceService(db)
    experience = found(
        await service.get_by_id(experience_id), "experience", experience_id,
    )

    categories = await CategoryService(db).get_many(experience.categories_id)
    for category in categories.values():
        category.travel_count = decrement_travel_count(category.travel_count)
    destination = await DestinationService(db).get_by_id(experience.destination_id)
    if destination is not None:
        destination.travel_count = decrement_travel_count(destination.travel_count)
        _refresh_snapshot(destination)

    await service.delete(experience)
    await commit_changes(db)
    logger.info(
        "Experience deleted",
        extra={"resource": "experience", "resource_id": experience_id, "user_id": user_id},
    )
    return DELETED
