"""Tests for the structlog configuration driven by create_app()."""

import logging

import pytest
import structlog
from fastapi import FastAPI
from structlog.stdlib import ProcessorFormatter

from loan_api.config import Settings
from loan_api.exceptions import NotFoundError
from loan_api.main import create_app
from loan_api.reporting import log_error
from tests.factories import raise_and_catch


def _structured_formatter() -> ProcessorFormatter:
    """Return the formatter installed on the root handler by configure_logging()."""
    for handler in logging.getLogger().handlers:
        if isinstance(handler.formatter, ProcessorFormatter):
            return handler.formatter
    raise AssertionError("structured handler not configured")


def test_production_app_renders_json(prod_settings: Settings) -> None:
    create_app(prod_settings)
    assert isinstance(_structured_formatter().processors[-1], structlog.processors.JSONRenderer)


def test_development_app_renders_console(dev_settings: Settings) -> None:
    create_app(dev_settings)
    assert isinstance(_structured_formatter().processors[-1], structlog.dev.ConsoleRenderer)


def test_development_output_includes_operational_traceback(
    caplog: pytest.LogCaptureFixture, dev_app: FastAPI, dev_settings: Settings
) -> None:
    error = raise_and_catch(NotFoundError("Application ID LA9999 not found."))
    assert isinstance(error, NotFoundError)

    log_error(error, dev_settings)

    [record] = [r for r in caplog.records if r.name == "loan_api.reporting"]
    output = _structured_formatter().format(record)
    assert "Application ID LA9999 not found." in output
    assert "raise_and_catch" in output
