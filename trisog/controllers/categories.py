"""Category controller — responses carry from_price, the cheapest linked experience."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.validation import parse_payload
from trisog.schemas.category import (
    CategoryResponse, CategoryUpsert, PricedCategoryResponse,
)
from trisog.services.base import commit_changes
from trisog.services.categories import CategoryService


def _priced(category, prices: dict[str, float]) -> PricedCategoryResponse:
    response = PricedCategoryResponse.model_validate(category)
    response.from_price = prices.get(category.id, 0)
    return response


async def list_categories(db: AsyncSession) -> list[PricedCategoryResponse]:
    service = CategoryService(db)
    categories = await service.list_all()
    prices = await service.from_prices()
    return [_priced(c, prices) for c in categories]


async def get_category(
    db: AsyncSession, category_id: str,
) -> PricedCategoryResponse:
    require_object_id(category_id, "category")
    service = CategoryService(db)
    category = found(
        await service.get_by_id(category_id), "category", category_id,
    )
    return _priced(category, await service.from_prices([category_id]))


async def create_category(
    db: AsyncSession, user_id: str, body: Any,
) -> CategoryResponse:
    require_user_id(user_id)
    payload = parse_payload(CategoryUpsert, body)
    category = await CategoryService(db).create(
        **payload.model_dump(), travel_count=0,
    )
    await commit_changes(db)
    return CategoryResponse.model_validate(category)


async def update_category(
    db: AsyncSession, user_id: str, category_id: str, body: Any,
) -> CategoryResponse:
    require_user_id(user_id)
    require_object_id(category_id, "category")
    service = CategoryService(db)
    category = found(
        await service.get_by_id(category_id), "category", category_id,
    )
    payload = parse_payload(CategoryUpsert, body)
    await service.update(category, **payload.model_dump())
    await commit_changes(db)
    return CategoryResponse.model_validate(category)


async def delete_category(
    db: AsyncSession, user_id: str, category_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(category_id, "category")
    service = CategoryService(db)
    category = found(
        await service.get_by_id(category_id), "category", category_id,
    )
    await service.delete(category)
    await commit_changes(db)
    return DELETED
