"""Newsletter persistence."""

from sqlalchemy import func, select

from trisog.models.newsletter import Newsletter
from trisog.services.base import CrudService


class NewsletterService(CrudService):
    model = Newsletter
    resource = "newsletter"

    async def get_by_email(self, email: str) -> Newsletter | None:
        async with self.guard("get newsletter by email"):
            result = await self.db.execute(
                select(Newsletter).where(
                    func.lower(Newsletter.email) == email.lower(),
                ),
            )
            return result.scalar_one_or_none()
