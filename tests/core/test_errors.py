"""Error Hierarchy & Logging — verifies envelopes, status codes and JSON log fields."""

import json
import logging

from trisog.core.errors import (
    AuthenticationError, DatabaseError, ErrorContext, ForbiddenError,
    ResourceNotFoundError, PayloadValidationError,
)
from trisog.infrastructure.observability import JSONFormatter, setup_logging


def test_client_errors_carry_message_and_status():
    err = ForbiddenError("You can only view bookings associated with your own account")
    assert err.http_status == 403
    assert err.to_response() == {
        "msg": "You can only view bookings associated with your own account",
    }
    assert PayloadValidationError("The title field is mandatory").http_status == 400
    assert AuthenticationError().http_status == 401


def test_not_found_default_message():
    assert ResourceNotFoundError().to_response() == {"msg": "No data found"}


def test_database_error_hides_details():
    err = DatabaseError("commit")
    assert err.http_status == 500
    assert err.to_response() == {"msg": "Internal server error"}
    assert err.operation == "commit"


def test_log_extra_includes_context():
    err = ResourceNotFoundError(
        context=ErrorContext(resource="booking", resource_id="abc", user_id="u1"),
    )
    assert err.log_extra() == {
        "error_code": "RESOURCE_NOT_FOUND",
        "resource": "booking",
        "resource_id": "abc",
        "user_id": "u1",
    }


def test_json_formatter_surfaces_extra_fields():
    record = logging.LogRecord(
        "trisog.test", logging.WARNING, __file__, 1, "Experience %s", ("deleted",), None,
    )
    record.resource = "experience"
    record.resource_id = "65a1b2c3d4e5f6a7b8c9d0e1"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "Experience deleted"
    assert payload["level"] == "WARNING"
    assert payload["resource"] == "experience"
    assert "user_id" not in payload


def test_setup_logging_replaces_its_handler():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.INFO
