"""Shared controller checks."""

from trisog.core.errors import ErrorContext, InvalidIdentifierError, ResourceNotFoundError
from trisog.core.identifiers import is_valid_object_id, is_valid_user_id

DELETED = {"msg": "Successfully deleted"}


def require_user_id(user_id: str) -> str:
    if not is_valid_user_id(user_id):
        raise InvalidIdentifierError(
            "Invalid user ID", ErrorContext(user_id=user_id),
        )
    return user_id


def require_object_id(value: str, resource: str) -> str:
    """Reject ids that are not 24-char hex with "Invalid <resource> ID"."""
    if not is_valid_object_id(value):
        raise InvalidIdentifierError(
            f"Invalid {resource} ID",
            ErrorContext(resource=resource, resource_id=value),
        )
    return value


def found(entity, resource: str, resource_id: str):
    if entity is None:
        raise ResourceNotFoundError(
            context=ErrorContext(resource=resource, resource_id=resource_id),
        )
    return entity
