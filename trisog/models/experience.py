"""Experience ORM — bookable tours plus their ordered category and plan links.

Invariants:
    - categories_id / plans_id preserve payload order via the position column
    - Link rows are owned by the experience (cascade delete-orphan)
    - rating is the mean of the six ratings fields, kept in sync by the review flow

Design Decisions:
    - Association tables instead of JSON id arrays: "has any of these categories"
      becomes an EXISTS subquery and link rows die with their experience
    - Link targets carry no foreign key: dangling ids surface as 404 on read,
      the same way a document store would behave
    - lazy="selectin" on links: async sessions cannot lazy-load on attribute access
"""

from datetime import datetime

from sqlalchemy import (
    String, Text, Integer, Float, Boolean, DateTime, JSON, ForeignKey,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trisog.core.identifiers import new_object_id
from trisog.db.base import Base


class ExperienceCategory(Base):
    __tablename__ = "experience_categories"

    experience_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("experiences.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(24), primary_key=True, index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ExperiencePlan(Base):
    __tablename__ = "experience_plans"

    experience_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("experiences.id", ondelete="CASCADE"),
        primary_key=True,
    )
    plan_id: Mapped[str] = mapped_column(String(24), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Experience(Base):
    __tablename__ = "experiences"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    city: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    video: Mapped[str] = mapped_column(Text, nullable=False)
    gallery: Mapped[str] = mapped_column(Text, nullable=False)
    map_link: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    is_activity: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    max_people: Mapped[int] = mapped_column(Integer, nullable=False)
    min_age: Mapped[int] = mapped_column(Integer, nullable=False)
    over_view: Mapped[str] = mapped_column(Text, nullable=False)
    include: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    exclude: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    default_price: Mapped[float] = mapped_column(Float, nullable=False)
    custom_prices: Mapped[list | None] = mapped_column(JSON, nullable=True)
    ratings: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    rating: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, index=True,
    )
    review_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    destination_id: Mapped[str] = mapped_column(
        String(24), nullable=False, index=True,
    )

    # Relationships
    category_links: Mapped[list[ExperienceCategory]] = relationship(
        ExperienceCategory, order_by=ExperienceCategory.position,
        cascade="all, delete-orphan", lazy="selectin",
    )
    plan_links: Mapped[list[ExperiencePlan]] = relationship(
        ExperiencePlan, order_by=ExperiencePlan.position,
        cascade="all, delete-orphan", lazy="selectin",
    )

    @property
    def categories_id(self) -> list[str]:
        return [link.category_id for link in self.category_links]

    @categories_id.setter
    def categories_id(self, ids: list[str]) -> None:
        existing = {link.category_id: link for link in self.category_links}
        links = []
        for position, category_id in enumerate(dict.fromkeys(ids)):
            link = existing.get(category_id) or ExperienceCategory(
                category_id=category_id,
            )
            link.position = position
            links.append(link)
        self.category_links = links

    @property
    def plans_id(self) -> list[str]:
        return [link.plan_id for link in self.plan_links]

    @plans_id.setter
    def plans_id(self, ids: list[str]) -> None:
        existing = {link.plan_id: link for link in self.plan_links}
        links = []
        for position, plan_id in enumerate(dict.fromkeys(ids)):
            link = existing.get(plan_id) or ExperiencePlan(plan_id=plan_id)
            link.position = position
            links.append(link)
        self.plan_links = links
