"""Favorite ORM — one favorites list per user."""

from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class Favorite(Base):
    __tablename__ = "favorites"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    user_id: Mapped[str] = mapped_column(
        String(256), nullable=False, unique=True,
    )
    experiences_id: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
