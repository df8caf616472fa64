"""Error taxonomy raised by services and routers.

Every failure a client can see is an ApiError tagged with one ErrorKind.
The kind fixes the HTTP status and the wire name; an ApiError never
carries a status of its own. The dispatcher in handlers.py translates
these into the standard error envelope:
{"timestamp": "...", "status": 404, "error": "NotFoundError", "message": "..."}.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of recognized failure kinds: (wire name, HTTP status, default message)."""

    BAD_REQUEST = (
        "BadRequestError",
        400,
        "The request could not be understood due to malformed syntax.",
    )
    UNAUTHORIZED = (
        "UnauthorizedError",
        401,
        "Authentication credentials were missing or invalid.",
    )
    FORBIDDEN = (
        "ForbiddenError",
        403,
        "You do not have permission to access this resource.",
    )
    NOT_FOUND = (
        "NotFoundError",
        404,
        "The requested resource was not found.",
    )
    CONFLICT = (
        "ConflictError",
        409,
        "The request could not be completed due to a conflict with the current state "
        "of the resource.",
    )
    INTERNAL = (
        "InternalServerError",
        500,
        "An internal server error occurred.",
    )

    def __init__(self, error_name: str, status_code: int, default_message: str) -> None:
        self.error_name = error_name
        self.status_code = status_code
        self.default_message = default_message

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind | None":
        """Return the kind whose fixed status is ``status_code``, if any."""
        for kind in cls:
            if kind.status_code == status_code:
                return kind
        return None


class ApiError(Exception):
    """A classified failure, ready for dispatch.

    Attributes are read-only once constructed. ``internal_detail`` holds a
    formatted traceback for failures that were not raised as ApiError in the
    first place; it never leaves the process in production.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        *,
        is_operational: bool = True,
        internal_detail: str | None = None,
    ) -> None:
        self._kind = kind
        self._message = message if message is not None else kind.default_message
        self._is_operational = is_operational
        self._internal_detail = internal_detail
        super().__init__(self._message)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_operational(self) -> bool:
        return self._is_operational

    @property
    def internal_detail(self) -> str | None:
        return self._internal_detail

    @property
    def status_code(self) -> int:
        return self._kind.status_code

    @property
    def name(self) -> str:
        return self._kind.error_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind.name}, message={self._message!r})"

    @staticmethod
    def internal_server_error(
        message: str | None = None,
        internal_detail: str | None = None,
    ) -> "ApiError":
        """Build the non-operational 500 used for failures nobody anticipated."""
        return ApiError(
            ErrorKind.INTERNAL,
            message,
            is_operational=False,
            internal_detail=internal_detail,
        )


def make_error(kind: ErrorKind, message: str | None = None) -> ApiError:
    """Create an operational error of the given kind.

    Falls back to the kind's default message when ``message`` is omitted.
    """
    return ApiError(kind, message)


class _KindError(ApiError):
    """Base for the per-kind shortcuts below; subclasses pin ``kind``."""

    kind_default: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.kind_default, message)


class BadRequestError(_KindError):
    """Malformed or missing input (400)."""

    kind_default = ErrorKind.BAD_REQUEST


class UnauthorizedError(_KindError):
    """Missing or invalid credentials (401)."""

    kind_default = ErrorKind.UNAUTHORIZED


class ForbiddenError(_KindError):
    """Authenticated but not permitted (403)."""

    kind_default = ErrorKind.FORBIDDEN


class NotFoundError(_KindError):
    """Requested resource or route does not exist (404)."""

    kind_default = ErrorKind.NOT_FOUND


class ConflictError(_KindError):
    """Request conflicts with the current state of the resource (409)."""

    kind_default = ErrorKind.CONFLICT


class InternalServerError(_KindError):
    """An anticipated server-side failure raised explicitly by endpoint code (500)."""

    kind_default = ErrorKind.INTERNAL
