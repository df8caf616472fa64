"""Centralized error dispatch.

Every failure raised while serving a request ends up in ErrorDispatcher.dispatch,
exactly once: classify, log, render, respond. Routers and services only raise;
they never build error responses themselves.
"""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from loan_api.classification import classify_error, from_http_exception, from_validation_error
from loan_api.config import Settings
from loan_api.exceptions import ApiError
from loan_api.middleware import ErrorDispatchMiddleware
from loan_api.reporting import log_error
from loan_api.schemas.error import ErrorResponse

# stdlib logger, separate from the structlog chain used by log_error
logger = logging.getLogger(__name__)

FALLBACK_BODY = "Internal Server Error"


def render_error(error: ApiError, settings: Settings) -> ErrorResponse:
    """Build the wire payload for ``error``; internal detail only outside production."""
    return ErrorResponse(
        timestamp=datetime.now(UTC),
        status=error.status_code,
        error=error.name,
        message=error.message,
        internal_detail=None if settings.is_production else error.internal_detail,
    )


class ErrorDispatcher:
    """Single exit point for failed requests.

    Usage:
        dispatcher = ErrorDispatcher(settings)
        dispatcher.install(app)
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def dispatch(self, request: Request, failure: object) -> Response:
        error = classify_error(failure, self.settings)
        try:
            log_error(error, self.settings, method=request.method, path=request.url.path)
        except Exception:
            logger.exception("error_logging_failed: %s", error.name)
        try:
            body = render_error(error, self.settings).to_wire()
            return JSONResponse(status_code=error.status_code, content=body)
        except Exception:
            logger.exception("error_rendering_failed: %s", error.name)
            return PlainTextResponse(FALLBACK_BODY, status_code=500)

    async def handle_api_error(self, request: Request, exc: ApiError) -> Response:
        return await self.dispatch(request, exc)

    async def handle_http_exception(
        self, request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Routing misses and framework-raised HTTP errors."""
        return await self.dispatch(request, from_http_exception(request, exc))

    async def handle_validation_error(
        self, request: Request, exc: RequestValidationError
    ) -> Response:
        """Path/query/body validation failures become 400 BadRequestError."""
        return await self.dispatch(request, from_validation_error(exc))

    def install(self, app: FastAPI) -> None:
        """Register the dispatcher for taxonomy, HTTP and validation errors.

        Anything else propagates to ErrorDispatchMiddleware, which hands it back
        to dispatch(). Handlers keyed on ``Exception`` run in Starlette's
        ServerErrorMiddleware and re-raise after responding.
        """
        app.add_exception_handler(ApiError, self.handle_api_error)
        app.add_exception_handler(StarletteHTTPException, self.handle_http_exception)
        app.add_exception_handler(RequestValidationError, self.handle_validation_error)
        app.add_middleware(ErrorDispatchMiddleware, dispatch_error=self.dispatch)
