"""Booking ORM — a user's reservation of an experience.

Invariants:
    - user_id is the token subject of the booking's owner
    - total_price is computed server-side from the experience default price
"""

from datetime import datetime

from sqlalchemy import String, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    time: Mapped[str] = mapped_column(String(50), nullable=False)
    ticket: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)
    experience_id: Mapped[str] = mapped_column(
        String(24), nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(256), nullable=False, index=True,
    )
