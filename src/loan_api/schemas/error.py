"""Error response schema.

All error responses use the same envelope:
{"timestamp": "...", "status": 404, "error": "NotFoundError", "message": "..."}.
``internalDetail`` is only ever populated outside production; when unset it is
dropped from the payload rather than sent as null.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Canonical error payload emitted by the dispatcher in handlers.py."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: datetime
    status: int
    error: str
    message: str
    internal_detail: str | None = Field(default=None, alias="internalDetail")

    def to_wire(self) -> dict[str, object]:
        """Serialize with camelCase keys, omitting internalDetail when unset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
