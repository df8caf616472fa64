from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from loan_api.config import Settings
from loan_api.dependencies import AppSettings
from loan_api.handlers import ErrorDispatcher
from loan_api.logging import configure_logging, get_logger
from loan_api.middleware import AccessLogMiddleware, RequestIDMiddleware
from loan_api.routers.loan import router as loan_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log service start and stop around the application lifetime."""
    settings: Settings = app.state.settings
    logger.info("service_started", service=settings.service_name, environment=settings.app_env)
    yield
    logger.info("service_stopped", service=settings.service_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around a single, immutable Settings instance.

    Middleware is added innermost first: error dispatch wraps the routes,
    access logging sees the final status, and the request ID is bound
    before anything else logs.
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(title=settings.service_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings

    ErrorDispatcher(settings).install(app)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(loan_router)

    @app.get("/")
    async def service_status(current: AppSettings) -> dict[str, str]:
        """Report that the service is up."""
        return {
            "service": current.service_name,
            "status": "running",
            "version": current.api_version,
        }

    return app


app = create_app()
