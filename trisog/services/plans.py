"""Plan persistence."""

from trisog.models.plan import Plan
from trisog.services.base import CrudService


class PlanService(CrudService):
    model = Plan
    resource = "plan"
