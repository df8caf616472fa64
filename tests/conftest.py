from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from loan_api.config import Environment, Settings
from loan_api.exceptions import ConflictError
from loan_api.main import create_app
from loan_api.repositories.loan import ApplicationStore, get_store

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]


async def _crash() -> None:
    raise RuntimeError("Database connection failed.")


class _UnprintableError(Exception):
    def __str__(self) -> str:
        raise ValueError("no str")


async def _unprintable() -> None:
    raise _UnprintableError()


async def _conflict() -> None:
    raise ConflictError("Record already exists.")


async def _paged(limit: int) -> dict[str, int]:
    return {"limit": limit}


def _build_app(settings: Settings) -> FastAPI:
    """Create an app plus routes that fail on purpose."""
    app = create_app(settings)
    app.add_api_route("/test/crash", _crash, methods=["GET"])
    app.add_api_route("/test/conflict", _conflict, methods=["GET"])
    app.add_api_route("/test/paged", _paged, methods=["GET"])
    app.add_api_route("/test/unprintable", _unprintable, methods=["GET"])
    return app


@pytest.fixture
def dev_settings() -> Settings:
    return Settings(app_env=Environment.DEVELOPMENT)


@pytest.fixture
def prod_settings() -> Settings:
    return Settings(app_env=Environment.PRODUCTION)


@pytest.fixture
def dev_app(dev_settings: Settings) -> FastAPI:
    return _build_app(dev_settings)


@pytest.fixture
def prod_app(prod_settings: Settings) -> FastAPI:
    return _build_app(prod_settings)


@pytest_asyncio.fixture
async def client(dev_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client against a development-mode app."""
    async with AsyncClient(
        transport=ASGITransport(app=dev_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def prod_client(prod_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client against a production-mode app."""
    async with AsyncClient(
        transport=ASGITransport(app=prod_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def seeded_client(
    dev_app: FastAPI, seeded_store: ApplicationStore
) -> AsyncIterator[AsyncClient]:
    """HTTP client whose application store is replaced with test seed data."""
    dev_app.dependency_overrides[get_store] = lambda: seeded_store

    async with AsyncClient(
        transport=ASGITransport(app=dev_app),
        base_url="http://test",
    ) as client:
        yield client

    dev_app.dependency_overrides.clear()
