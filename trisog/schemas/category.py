"""Category Schemas."""

from trisog.schemas.common import RequiredStr, ResponseModel, UpsertModel


class CategoryUpsert(UpsertModel):
    name: RequiredStr
    icon: RequiredStr


class CategoryResponse(ResponseModel):
    id: str
    name: str
    icon: str
    travel_count: int


class PricedCategoryResponse(CategoryResponse):
    """Category as listed on its own: carries the cheapest linked experience price."""
    from_price: float = 0
