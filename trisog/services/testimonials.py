"""Testimonial persistence."""

from trisog.models.testimonial import Testimonial
from trisog.services.base import CrudService


class TestimonialService(CrudService):
    model = Testimonial
    resource = "testimonial"
