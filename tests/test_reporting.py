"""Tests for the logging policy applied to classified errors."""

import logging

import pytest

from loan_api.classification import classify_error
from loan_api.config import Settings
from loan_api.exceptions import NotFoundError
from loan_api.reporting import log_error
from tests.factories import raise_and_catch

LOGGER_NAME = "loan_api.reporting"


def _events(caplog: pytest.LogCaptureFixture) -> list[tuple[int, dict[str, object]]]:
    """Return (level, event_dict) pairs emitted by the reporting module."""
    return [
        (record.levelno, record.msg)  # type: ignore[misc]
        for record in caplog.records
        if record.name == LOGGER_NAME and isinstance(record.msg, dict)
    ]


@pytest.mark.parametrize("env", ["dev_settings", "prod_settings"])
def test_non_operational_error_is_critical_with_full_detail(
    caplog: pytest.LogCaptureFixture, request: pytest.FixtureRequest, env: str
) -> None:
    settings: Settings = request.getfixturevalue(env)
    error = classify_error(raise_and_catch(RuntimeError("Database connection failed.")), settings)

    log_error(error, settings, method="GET", path="/test/crash")

    [(level, event)] = _events(caplog)
    assert level == logging.CRITICAL
    assert event["event"] == "non_operational_error"
    assert event["error"] == "InternalServerError"
    assert "RuntimeError" in str(event["internal_detail"])
    assert event["path"] == "/test/crash"


def test_operational_error_in_production_is_warning_without_detail(
    caplog: pytest.LogCaptureFixture, prod_settings: Settings
) -> None:
    log_error(NotFoundError("Application ID LA9999 not found."), prod_settings)

    [(level, event)] = _events(caplog)
    assert level == logging.WARNING
    assert event["event"] == "operational_error"
    assert event["error"] == "NotFoundError"
    assert event["message"] == "Application ID LA9999 not found."
    assert "internal_detail" not in event
    assert "status" not in event
    assert "exc_info" not in event


def test_operational_error_in_development_is_error_with_full_detail(
    caplog: pytest.LogCaptureFixture, dev_settings: Settings
) -> None:
    error = raise_and_catch(NotFoundError("Application ID LA9999 not found."))
    assert isinstance(error, NotFoundError)

    log_error(error, dev_settings, method="GET")

    [(level, event)] = _events(caplog)
    assert level == logging.ERROR
    assert event["event"] == "operational_error"
    assert event["status"] == 404
    assert event["method"] == "GET"
    # raise-site traceback travels with the event
    assert event["exc_info"] is error
    assert error.__traceback__ is not None


def test_logging_does_not_alter_the_error(
    caplog: pytest.LogCaptureFixture, dev_settings: Settings
) -> None:
    error = NotFoundError("Resource not found.")

    log_error(error, dev_settings)

    assert error.message == "Resource not found."
    assert error.is_operational is True
    assert error.internal_detail is None
