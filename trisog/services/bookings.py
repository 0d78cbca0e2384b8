"""Booking persistence."""

from sqlalchemy import func, select

from trisog.models.booking import Booking
from trisog.services.base import CrudService


class BookingService(CrudService):
    model = Booking
    resource = "booking"

    async def list_by_user(self, user_id: str) -> list[Booking]:
        async with self.guard("list bookings by user"):
            result = await self.db.execute(
                select(Booking)
                .where(Booking.user_id == user_id)
                .order_by(Booking.id),
            )
            return list(result.scalars().all())

    async def count_all(self) -> int:
        async with self.guard("count bookings"):
            result = await self.db.execute(
                select(func.count()).select_from(Booking),
            )
            return result.scalar_one()
