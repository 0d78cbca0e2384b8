"""Category ORM — experience themes with a travel counter."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    icon: Mapped[str] = mapped_column(String(500), nullable=False)
    travel_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
