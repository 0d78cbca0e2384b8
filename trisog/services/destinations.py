"""Destination persistence."""

from trisog.models.destination import Destination
from trisog.services.base import CrudService


class DestinationService(CrudService):
    model = Destination
    resource = "destination"
