"""Newsletter Schemas."""

from pydantic import EmailStr

from trisog.schemas.common import ResponseModel, UpsertModel


class NewsletterUpsert(UpsertModel):
    email: EmailStr


class NewsletterResponse(ResponseModel):
    id: str
    email: str
