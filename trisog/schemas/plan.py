"""Plan Schemas."""

from trisog.schemas.common import RequiredStr, ResponseModel, UpsertModel


class PlanUpsert(UpsertModel):
    time: RequiredStr
    title: RequiredStr
    description: RequiredStr
    topics: list[str]


class PlanResponse(ResponseModel):
    id: str
    time: str
    title: str
    description: str
    topics: list[str]
