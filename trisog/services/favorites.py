"""Favorite list persistence (one row per user)."""

from sqlalchemy import select

from trisog.models.favorite import Favorite
from trisog.services.base import CrudService


class FavoriteService(CrudService):
    model = Favorite
    resource = "favorite"

    async def get_by_user(self, user_id: str) -> Favorite | None:
        async with self.guard("get favorites by user"):
            result = await self.db.execute(
                select(Favorite).where(Favorite.user_id == user_id),
            )
            return result.scalar_one_or_none()
