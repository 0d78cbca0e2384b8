"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every entity id is a 24-char hex object id (core/identifiers.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all() or Alembic autogenerate runs
"""

from trisog.models.destination import Destination  # noqa: F401
from trisog.models.experience import (  # noqa: F401
    Experience, ExperienceCategory, ExperiencePlan,
)
from trisog.models.category import Category  # noqa: F401
from trisog.models.plan import Plan  # noqa: F401
from trisog.models.booking import Booking  # noqa: F401
from trisog.models.review import Review  # noqa: F401
from trisog.models.favorite import Favorite  # noqa: F401
from trisog.models.testimonial import Testimonial  # noqa: F401
from trisog.models.newsletter import Newsletter  # noqa: F401
