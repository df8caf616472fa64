"""Map arbitrary raised failures onto the error taxonomy.

classify_error() is total: whatever it is handed, it returns an ApiError.
Framework exceptions (routing misses, request validation) are translated
into taxonomy members first so they flow through the same dispatcher.
"""

import traceback
from http import HTTPStatus

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from loan_api.config import Settings
from loan_api.exceptions import ApiError, BadRequestError, ErrorKind, NotFoundError

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def classify_error(failure: object, settings: Settings) -> ApiError:
    """Return ``failure`` if it is already an ApiError, else wrap it as a non-operational 500."""
    match failure:
        case ApiError():
            return failure
        case _:
            error = ApiError.internal_server_error(
                UNEXPECTED_ERROR_MESSAGE if settings.is_production else _raw_message(failure),
                internal_detail=_diagnostic_trace(failure),
            )
            if isinstance(failure, BaseException):
                error.__cause__ = failure
            return error


def _raw_message(failure: object) -> str:
    match failure:
        case None:
            return ErrorKind.INTERNAL.default_message
        case str():
            return failure
    try:
        if isinstance(failure, BaseException):
            return str(failure) or type(failure).__name__
        return repr(failure)
    except Exception:
        # __str__ or __repr__ itself raised
        return type(failure).__name__


def _diagnostic_trace(failure: object) -> str:
    try:
        if isinstance(failure, BaseException):
            return "".join(traceback.format_exception(failure))
        return repr(failure)
    except Exception:
        return object.__repr__(failure)


def from_http_exception(request: Request, exc: StarletteHTTPException) -> Exception:
    """Translate a Starlette HTTPException into a taxonomy member.

    404/405 with the stock detail are routing misses and report the method and
    path. 5xx statuses are returned untouched so classification treats them
    as unexpected.
    """
    default_detail = _default_detail(exc.status_code)
    custom_detail = str(exc.detail) if exc.detail and exc.detail != default_detail else None

    routing_miss = exc.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED)
    if routing_miss and not custom_detail:
        return NotFoundError(f"Route {request.method} {request.url.path} not found.")

    kind = ErrorKind.from_status(exc.status_code)
    if kind is not None and kind is not ErrorKind.INTERNAL:
        return ApiError(kind, custom_detail)
    if exc.status_code < HTTPStatus.INTERNAL_SERVER_ERROR:
        return BadRequestError(custom_detail)
    return exc


def from_validation_error(exc: RequestValidationError) -> BadRequestError:
    """Summarize FastAPI's validation errors into a single 400 message."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")
    if not problems:
        return BadRequestError()
    return BadRequestError("Invalid request: " + "; ".join(problems))


def _default_detail(status_code: int) -> str | None:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None
