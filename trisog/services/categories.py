"""Category persistence, plus the price lookup behind from_price."""

from sqlalchemy import select

from trisog.core.pricing import category_from_prices
from trisog.models.category import Category
from trisog.models.experience import Experience, ExperienceCategory
from trisog.services.base import CrudService


class CategoryService(CrudService):
    model = Category
    resource = "category"

    async def from_prices(self, category_ids=None) -> dict[str, float]:
        """Lowest experience default_price per category id."""
        query = (
            select(ExperienceCategory.category_id, Experience.default_price)
            .join(Experience, Experience.id == ExperienceCategory.experience_id)
        )
        if category_ids is not None:
            query = query.where(ExperienceCategory.category_id.in_(list(category_ids)))
        async with self.guard("category prices"):
            rows = (await self.db.execute(query)).all()
        return category_from_prices(
            ((category_id,), price) for category_id, price in rows
        )
