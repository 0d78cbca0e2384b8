"""Experience persistence — filtered, sorted, paginated listing and link upkeep.

Invariants:
    - list_page() applies the same filters to the page query and the count query
    - Results are ordered by the requested column, then by id for a stable page order
    - Category/plan links are replaced wholesale on update (position = payload order)
"""

from sqlalchemy import func, select

from trisog.core.domain_types import SortOrder
from trisog.core.query_options import ExperienceFilters, QueryOptions
from trisog.models.experience import Experience, ExperienceCategory
from trisog.services.base import CrudService


def _filter_conditions(filters: ExperienceFilters) -> list:
    conditions = []
    if filters.title:
        conditions.append(Experience.title.icontains(filters.title, autoescape=True))
    if filters.max_price is not None:
        conditions.append(Experience.default_price <= filters.max_price)
    if filters.category_ids:
        conditions.append(Experience.category_links.any(
            ExperienceCategory.category_id.in_(filters.category_ids),
        ))
    if filters.destination_ids:
        conditions.append(Experience.destination_id.in_(filters.destination_ids))
    if filters.min_rating is not None:
        conditions.append(Experience.rating >= filters.min_rating)
    if filters.on_date is not None:
        conditions.append(Experience.start_date <= filters.on_date)
        conditions.append(Experience.end_date >= filters.on_date)
    if filters.guests is not None:
        conditions.append(Experience.max_people == filters.guests)
    return conditions


class ExperienceService(CrudService):
    model = Experience
    resource = "experience"

    async def list_page(
        self, options: QueryOptions, only_ids=None,
    ) -> tuple[list[Experience], int]:
        """One page of experiences plus the total matching count."""
        conditions = _filter_conditions(options.filters)
        if only_ids is not None:
            conditions.append(Experience.id.in_(list(only_ids)))

        column = getattr(Experience, options.sort_by)
        ordering = column.asc() if options.order == SortOrder.ASC else column.desc()
        tiebreak = (
            Experience.id.asc() if options.order == SortOrder.ASC
            else Experience.id.desc()
        )

        async with self.guard("list experiences"):
            total = (await self.db.execute(
                select(func.count()).select_from(Experience).where(*conditions),
            )).scalar_one()
            result = await self.db.execute(
                select(Experience)
                .where(*conditions)
                .order_by(ordering, tiebreak)
                .offset(options.offset)
                .limit(options.limit),
            )
            return list(result.scalars().all()), total

    async def count_by_destination(self, destination_id: str) -> int:
        async with self.guard("count experiences by destination"):
            result = await self.db.execute(
                select(func.count()).select_from(Experience).where(
                    Experience.destination_id == destination_id,
                ),
            )
            return result.scalar_one()

    async def create(self, *, categories_id, plans_id, **fields) -> Experience:
        experience = Experience(**fields)
        experience.categories_id = list(categories_id)
        experience.plans_id = list(plans_id)
        return await self._add(experience)

    async def update(
        self, experience: Experience, *, categories_id=None, plans_id=None,
        **fields,
    ) -> Experience:
        for name, value in fields.items():
            setattr(experience, name, value)
        if categories_id is not None:
            experience.categories_id = list(categories_id)
        if plans_id is not None:
            experience.plans_id = list(plans_id)
        await self._flush("update experience")
        return experience
