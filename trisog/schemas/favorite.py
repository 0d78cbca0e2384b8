"""Favorite Schemas."""

from trisog.schemas.common import RequiredStr, ResponseModel, UpsertModel


class FavoriteUpsert(UpsertModel):
    experience_id: RequiredStr


class FavoriteResponse(ResponseModel):
    id: str
    user_id: str
    experiences_id: list[str]
