"""Logging policy for classified errors.

| is_operational | environment    | level    | detail recorded                      |
|----------------|----------------|----------|--------------------------------------|
| False          | any            | critical | name, message, internal detail       |
| True           | production     | warning  | name and message only                |
| True           | development    | error    | name, status, message, traceback     |
"""

from typing import Any

from loan_api.config import Settings
from loan_api.exceptions import ApiError
from loan_api.logging import get_logger

logger = get_logger(__name__)


def log_error(error: ApiError, settings: Settings, **context: Any) -> None:
    """Record ``error`` according to the policy table above.

    ``context`` (typically method and path) is attached to every event.
    The error itself is never modified.
    """
    if not error.is_operational:
        logger.critical(
            "non_operational_error",
            error=error.name,
            message=error.message,
            internal_detail=error.internal_detail,
            **context,
        )
    elif settings.is_production:
        logger.warning("operational_error", error=error.name, message=error.message, **context)
    else:
        logger.error(
            "operational_error",
            error=error.name,
            status=error.status_code,
            message=error.message,
            internal_detail=error.internal_detail,
            exc_info=error,
            **context,
        )
