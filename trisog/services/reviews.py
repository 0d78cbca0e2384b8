"""Review persistence and per-email / per-experience aggregates."""

from sqlalchemy import func, select

from trisog.models.review import Review
from trisog.services.base import CrudService


class ReviewService(CrudService):
    model = Review
    resource = "review"

    async def list_by_experience(self, experience_id: str) -> list[Review]:
        async with self.guard("list reviews by experience"):
            result = await self.db.execute(
                select(Review)
                .where(Review.experience_id == experience_id)
                .order_by(Review.id),
            )
            return list(result.scalars().all())

    async def email_counts(self, emails) -> dict[str, int]:
        """Number of reviews written with each of the given emails."""
        emails = list(dict.fromkeys(emails))
        if not emails:
            return {}
        async with self.guard("count reviews by email"):
            result = await self.db.execute(
                select(Review.email, func.count())
                .where(Review.email.in_(emails))
                .group_by(Review.email),
            )
            return {email: count for email, count in result.all()}

    async def ratings_for_experience(self, experience_id: str) -> list[dict]:
        async with self.guard("load experience ratings"):
            result = await self.db.execute(
                select(Review.ratings).where(
                    Review.experience_id == experience_id,
                ),
            )
            return list(result.scalars().all())
