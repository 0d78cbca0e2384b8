"""Initial schema — destinations, experiences and links, categories, plans,
bookings, reviews, favorites, testimonials, newsletters.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "destinations",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("about", sa.Text, nullable=False),
        sa.Column("continent", sa.String(20), nullable=False),
        sa.Column("map_link", sa.Text, nullable=False),
        sa.Column("weather", sa.JSON, nullable=False),
        sa.Column("language", sa.JSON, nullable=False),
        sa.Column("currency", sa.String(100), nullable=False),
        sa.Column("area", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("population", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("time_zone", sa.String(100), nullable=False),
        sa.Column("time_to_travel", sa.JSON, nullable=False),
        sa.Column("image", sa.Text, nullable=True),
        sa.Column("images", sa.JSON, nullable=False),
        sa.Column("travel_count", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("icon", sa.String(500), nullable=False),
        sa.Column("travel_count", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "plans",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("time", sa.String(100), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("topics", sa.JSON, nullable=False),
    )

    op.create_table(
        "experiences",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("city", sa.String(200), nullable=False),
        sa.Column("image", sa.Text, nullable=False),
        sa.Column("video", sa.Text, nullable=False),
        sa.Column("gallery", sa.Text, nullable=False),
        sa.Column("map_link", sa.Text, nullable=False),
        sa.Column("start_date", sa.DateTime, nullable=False),
        sa.Column("end_date", sa.DateTime, nullable=False),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("is_activity", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("max_people", sa.Integer, nullable=False),
        sa.Column("min_age", sa.Integer, nullable=False),
        sa.Column("over_view", sa.Text, nullable=False),
        sa.Column("include", sa.JSON, nullable=False),
        sa.Column("exclude", sa.JSON, nullable=False),
        sa.Column("default_price", sa.Float, nullable=False),
        sa.Column("custom_prices", sa.JSON, nullable=True),
        sa.Column("ratings", sa.JSON, nullable=False),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("destination_id", sa.String(24), nullable=False),
    )
    op.create_index("ix_experiences_rating", "experiences", ["rating"])
    op.create_index(
        "ix_experiences_destination_id", "experiences", ["destination_id"],
    )

    op.create_table(
        "experience_categories",
        sa.Column(
            "experience_id", sa.String(24),
            sa.ForeignKey("experiences.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("category_id", sa.String(24), primary_key=True),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index(
        "ix_experience_categories_category_id",
        "experience_categories", ["category_id"],
    )

    op.create_table(
        "experience_plans",
        sa.Column(
            "experience_id", sa.String(24),
            sa.ForeignKey("experiences.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("plan_id", sa.String(24), primary_key=True),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("date", sa.DateTime, nullable=False),
        sa.Column("time", sa.String(50), nullable=False),
        sa.Column("ticket", sa.JSON, nullable=False),
        sa.Column("total_price", sa.Float, nullable=False),
        sa.Column("experience_id", sa.String(24), nullable=False),
        sa.Column("user_id", sa.String(256), nullable=False),
    )
    op.create_index("ix_bookings_experience_id", "bookings", ["experience_id"])
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("comment", sa.Text, nullable=False),
        sa.Column("image", sa.Text, nullable=False),
        sa.Column("ratings", sa.JSON, nullable=False),
        sa.Column("experience_id", sa.String(24), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_reviews_email", "reviews", ["email"])
    op.create_index("ix_reviews_experience_id", "reviews", ["experience_id"])

    op.create_table(
        "favorites",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("user_id", sa.String(256), nullable=False, unique=True),
        sa.Column("experiences_id", sa.JSON, nullable=False),
    )

    op.create_table(
        "testimonials",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("author", sa.String(200), nullable=False),
    )

    op.create_table(
        "newsletters",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
    )


def downgrade() -> None:
    op.drop_table("newsletters")
    op.drop_table("testimonials")
    op.drop_table("favorites")
    op.drop_index("ix_reviews_experience_id", table_name="reviews")
    op.drop_index("ix_reviews_email", table_name="reviews")
    op.drop_table("reviews")
    op.drop_index("ix_bookings_user_id", table_name="bookings")
    op.drop_index("ix_bookings_experience_id", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("experience_plans")
    op.drop_index(
        "ix_experience_categories_category_id",
        table_name="experience_categories",
    )
    op.drop_table("experience_categories")
    op.drop_index("ix_experiences_destination_id", table_name="experiences")
    op.drop_index("ix_experiences_rating", table_name="experiences")
    op.drop_table("experiences")
    op.drop_table("plans")
    op.drop_table("categories")
    op.drop_table("destinations")
