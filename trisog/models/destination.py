"""Destination ORM — places experiences happen in, with denormalised snapshots.

Invariants:
    - id is a 24-char hex object id generated on insert
    - image mirrors images[0]; weather always holds all six periods
    - travel_count counts linked experiences and never goes negative

Design Decisions:
    - JSON columns for weather, language, time_to_travel, images: read and written whole
"""

from sqlalchemy import String, Text, Integer, BigInteger, JSON
from sqlalchemy.orm import Mapped, mapped_column

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class Destination(Base):
    __tablename__ = "destinations"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    about: Mapped[str] = mapped_column(Text, nullable=False)
    continent: Mapped[str] = mapped_column(String(20), nullable=False)
    map_link: Mapped[str] = mapped_column(Text, nullable=False)
    weather: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    language: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    currency: Mapped[str] = mapped_column(String(100), nullable=False)
    area: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    population: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
    time_zone: Mapped[str] = mapped_column(String(100), nullable=False)
    time_to_travel: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    travel_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
