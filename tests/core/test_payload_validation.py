"""Payload Validation — verifies the client-facing phrasing of schema errors.

Tests:
    - Non-object bodies are rejected before schema validation
    - Each pydantic error type maps to its field message
    - Custom validator messages pass through unchanged
"""

import pytest

from trisog.core.errors import PayloadValidationError
from trisog.core.validation import describe_error, first_error_message, parse_payload
from trisog.schemas.category import CategoryUpsert
from trisog.schemas.destination import DestinationUpsert
from trisog.schemas.experience import ExperienceUpsert
from trisog.schemas.newsletter import NewsletterUpsert
from trisog.schemas.plan import PlanUpsert
from trisog.schemas.review import ReviewUpsert

from tests.api.payloads import (
    MISSING_ID, destination_payload, experience_payload, review_payload,
)


def _message(model, body) -> str:
    with pytest.raises(PayloadValidationError) as exc:
        parse_payload(model, body)
    assert exc.value.http_status == 400
    return exc.value.message


@pytest.mark.parametrize("body", [None, [], "text", 3])
def test_non_object_body_rejected(body):
    assert _message(CategoryUpsert, body) == "Invalid request body"


def test_valid_payload_returns_model_with_stripped_strings():
    category = parse_payload(CategoryUpsert, {"name": "  Beach ", "icon": "sun"})
    assert category.name == "Beach"


def test_missing_field_is_mandatory():
    assert _message(CategoryUpsert, {"icon": "sun"}) == "The name field is mandatory"


def test_blank_string_is_mandatory():
    assert _message(CategoryUpsert, {"name": "   ", "icon": "sun"}) == (
        "The name field is mandatory"
    )


def test_wrong_scalar_type():
    assert _message(CategoryUpsert, {"name": 5, "icon": "sun"}) == (
        "The name field must be a string"
    )


def test_array_item_type():
    body = {"time": "Day 1", "title": "t", "description": "d", "topics": ["a", 2]}
    assert _message(PlanUpsert, body) == "Each item in the topics array must be a string"


def test_array_expected():
    body = {"time": "Day 1", "title": "t", "description": "d", "topics": "a"}
    assert _message(PlanUpsert, body) == "The topics field must be an array"


def test_invalid_email():
    assert _message(NewsletterUpsert, {"email": "not-an-email"}) == "Invalid email"


def test_rating_out_of_range():
    body = review_payload(MISSING_ID)
    body["ratings"]["food"] = 7
    assert _message(ReviewUpsert, body) == "The food must be less than or equal to 5"


def test_negative_integer():
    body = destination_payload(area=-1)
    assert _message(DestinationUpsert, body) == (
        "The area must be greater than or equal to 0"
    )


def test_continent_vocabulary():
    message = _message(DestinationUpsert, destination_payload(continent="europe"))
    assert message.startswith("The continent field must be a valid continent name")
    assert message.endswith("Asia, Europe, Oceania.")


def test_map_link_prefix():
    message = _message(
        DestinationUpsert, destination_payload(map_link="https://maps.example.com"),
    )
    assert message == "The map_link must start with 'https://www.google.com/maps/embed'"


def test_month_vocabulary():
    message = _message(
        DestinationUpsert, destination_payload(time_to_travel=["June"]),
    )
    assert message.startswith("Each item in the time_to_travel array must be a valid")


def test_image_domain():
    message = _message(
        DestinationUpsert, destination_payload(image="https://img.example.com/a.jpg"),
    )
    assert message == "The image URL must start with a valid domain"


def test_location_prefix_never_reaches_message():
    error = {"type": "missing", "loc": ("body", "title"), "msg": "Field required"}
    assert describe_error(error) == "The title field is mandatory"


def test_unknown_error_type_falls_back():
    error = {"type": "url_parsing", "loc": ("query", "link"), "msg": "bad"}
    assert describe_error(error) == "Invalid link value"


def test_first_error_of_nothing():
    assert first_error_message([]) == "Invalid request body"


def test_float_bounds_rendered_without_decimal_point():
    error = {"type": "less_than_equal", "loc": ("body", "food"), "ctx": {"le": 5.0}}
    assert describe_error(error) == "The food must be less than or equal to 5"
    error = {"type": "greater_than_equal", "loc": ("price",), "ctx": {"ge": 0.5}}
    assert describe_error(error) == "The price must be greater than or equal to 0.5"


def test_negative_default_price():
    body = experience_payload(MISSING_ID, default_price=-1)
    assert _message(ExperienceUpsert, body) == (
        "The default_price must be greater than or equal to 0"
    )
