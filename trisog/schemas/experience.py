"""Experience Schemas — upsert payload, stored (ids) form, expanded form, pagination.

Invariants:
    - duration >= 1; max_people, min_age >= 0; default_price >= 0
    - custom_prices is optional; each entry needs a date and a price >= 0
    - ExperienceResponse carries link ids, ExperienceDetail carries linked objects
"""

from datetime import datetime

from pydantic import Field

from trisog.schemas.category import CategoryResponse
from trisog.schemas.common import (
    NonNegativeInt, RequiredStr, ResponseModel, UpsertModel, UtcDatetime,
)
from trisog.schemas.destination import DestinationResponse
from trisog.schemas.plan import PlanResponse


class CustomPrice(UpsertModel):
    date: UtcDatetime
    price: float = Field(ge=0)


class ExperienceUpsert(UpsertModel):
    title: RequiredStr
    city: RequiredStr
    image: RequiredStr
    video: RequiredStr
    gallery: RequiredStr
    map_link: RequiredStr
    start_date: UtcDatetime
    end_date: UtcDatetime
    duration: int = Field(ge=1)
    is_activity: bool
    max_people: NonNegativeInt
    min_age: NonNegativeInt
    over_view: RequiredStr
    include: list[str]
    exclude: list[str]
    default_price: float = Field(ge=0)
    custom_prices: list[CustomPrice] | None = None
    categories_id: list[str]
    plans_id: list[str]
    destination_id: RequiredStr

    def custom_prices_document(self) -> list[dict] | None:
        """custom_prices as stored in the JSON column (ISO dates)."""
        if self.custom_prices is None:
            return None
        return [
            {"date": p.date.isoformat(), "price": p.price}
            for p in self.custom_prices
        ]


class _ExperienceFields(ResponseModel):
    id: str
    title: str
    city: str
    image: str
    video: str
    gallery: str
    map_link: str
    start_date: datetime
    end_date: datetime
    duration: int
    is_activity: bool
    max_people: int
    min_age: int
    over_view: str
    include: list[str]
    exclude: list[str]
    default_price: float
    custom_prices: list[dict] | None = None
    ratings: dict
    rating: float
    review_count: int


class ExperienceResponse(_ExperienceFields):
    categories_id: list[str]
    plans_id: list[str]
    destination_id: str


class ExperienceDetail(_ExperienceFields):
    categories: list[CategoryResponse]
    plans: list[PlanResponse]
    destination: DestinationResponse


class PaginatedExperiences(ResponseModel):
    page: int
    limit: int
    total_pages: int
    total_experiences: int
    experiences: list[ExperienceDetail]
