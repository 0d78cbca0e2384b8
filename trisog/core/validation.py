"""Payload Validation — run Pydantic models and phrase the first error for clients.

Invariants:
    - parse_payload() returns a validated model or raises PayloadValidationError
    - Only the FIRST error is reported, phrased per field ("The title field is mandatory")
    - Location prefixes added by FastAPI ("body", "query", "path") never reach the message

Design Decisions:
    - Message table keyed by pydantic error type: validators raise plain ValueError
      with the client message, everything else is phrased here in one place
"""

from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from trisog.core.errors import PayloadValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_LOCATION_PREFIXES = {"body", "query", "path", "header"}

_MANDATORY = {"missing", "string_too_short", "too_short"}
_STRING = {"string_type"}
_INTEGER = {"int_type", "int_parsing", "int_from_float"}
_NUMBER = {"float_type", "float_parsing", "decimal_type", "decimal_parsing"}
_BOOLEAN = {"bool_type", "bool_parsing"}
_ARRAY = {"list_type", "tuple_type"}
_OBJECT = {"dict_type", "model_type", "model_attributes_type"}
_DATE = {
    "datetime_type", "datetime_parsing", "datetime_from_date_parsing",
    "date_type", "date_parsing", "date_from_datetime_parsing",
}


def parse_payload(model: type[ModelT], body: Any) -> ModelT:
    """Validate a raw JSON body against model."""
    if not isinstance(body, dict):
        raise PayloadValidationError("Invalid request body")
    try:
        return model.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        raise PayloadValidationError(
            first_error_message(errors), field=_field_path(errors[0]["loc"]),
        )


def first_error_message(errors: Sequence[dict]) -> str:
    if not errors:
        return "Invalid request body"
    return describe_error(errors[0])


def describe_error(error: dict) -> str:
    loc = [part for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    # errors on list items point at an index: ("include", 0)
    if loc and isinstance(loc[-1], int):
        parent = _last_name(loc[:-1])
        if kind in _STRING:
            return f"Each item in the {parent} array must be a string"
        if kind in _INTEGER or kind in _NUMBER:
            return f"Each item in the {parent} array must be a number"
        if kind in _OBJECT:
            return f"Each item in the {parent} array must be an object"

    field = _last_name(loc) or "request"

    if kind in _MANDATORY:
        return f"The {field} field is mandatory"
    if field == "email" and kind not in _STRING:
        return "Invalid email"
    if kind == "value_error":
        return _strip_value_error(error.get("msg", ""))
    if kind in _STRING:
        return f"The {field} field must be a string"
    if kind in _INTEGER:
        return f"The {field} field must be an integer"
    if kind in _NUMBER:
        return f"The {field} field must be a number"
    if kind in _BOOLEAN:
        return f"The {field} field must be a boolean value"
    if kind in _ARRAY:
        return f"The {field} field must be an array"
    if kind in _OBJECT:
        return f"The {field} field must be an object"
    if kind in _DATE:
        return f"The {field} field must be a valid date"
    if kind == "greater_than_equal":
        return f"The {field} must be greater than or equal to {_bound(ctx.get('ge'))}"
    if kind == "less_than_equal":
        return f"The {field} must be less than or equal to {_bound(ctx.get('le'))}"
    if kind == "greater_than":
        return f"The {field} must be greater than {_bound(ctx.get('gt'))}"
    return f"Invalid {field} value"


def _bound(value: Any) -> str:
    """Render a numeric limit without a trailing ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _last_name(loc: Sequence[Any]) -> str:
    for part in reversed(loc):
        if isinstance(part, str):
            return part
    return ""


def _field_path(loc: Sequence[Any]) -> str | None:
    parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
    return ".".join(parts) or None


def _strip_value_error(msg: str) -> str:
    prefix = "Value error, "
    return msg[len(prefix):] if msg.startswith(prefix) else msg
