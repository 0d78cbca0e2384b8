"""Newsletter ORM — subscribed email addresses (unique)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class Newsletter(Base):
    __tablename__ = "newsletters"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
