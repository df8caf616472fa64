"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request

from loan_api.config import Settings
from loan_api.repositories.loan import ApplicationStore, get_store


def get_settings(request: Request) -> Settings:
    """Return the Settings instance the app was created with."""
    return request.app.state.settings  # type: ignore[no-any-return]


AppSettings = Annotated[Settings, Depends(get_settings)]
Store = Annotated[ApplicationStore, Depends(get_store)]
