"""
Error taxonomy and its HTTP mapping.

Repositories and handlers raise the exceptions defined here and never
build HTTP responses themselves.  ``register_exception_handlers``
installs a single FastAPI handler that renders any
``InvitationAPIError`` as::

    {"detail": "<human readable message>", "code": "<machine readable code>"}

with the status code carried by the exception class.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)


class InvitationAPIError(Exception):
    """Base class for every error the API reports to callers."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InvitationAPIError):
    """A required field is missing, empty or zero."""

    status_code = 400
    code = "validation_error"


class MalformedIdentifierError(InvitationAPIError):
    """An identifier in the path, query or body is not a valid ObjectId."""

    status_code = 400
    code = "malformed_identifier"


class UnknownReferenceError(InvitationAPIError):
    """A guest references a client that does not exist."""

    status_code = 409
    code = "unknown_reference"


class NotFoundError(InvitationAPIError):
    """A lookup by id matched no document."""

    status_code = 404
    code = "not_found"


class StoreError(InvitationAPIError):
    """The document store failed: connectivity, driver error or timeout.

    Timeouts answer 504 so callers can tell an overloaded store apart
    from an unreachable one (502).
    """

    def __init__(self, message: str, timeout: bool = False) -> None:
        super().__init__(message)
        self.timeout = timeout

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return 504 if self.timeout else 502

    @property
    def code(self) -> str:  # type: ignore[override]
        return "store_timeout" if self.timeout else "store_unavailable"

    @classmethod
    def from_driver(cls, exc: PyMongoError) -> "StoreError":
        """Wrap a pymongo exception, keeping its timeout classification."""
        return cls(f"store operation failed: {exc}", timeout=exc.timeout)


async def _handle_invitation_error(request: Request, exc: InvitationAPIError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error mapping to ``app``."""
    app.add_exception_handler(InvitationAPIError, _handle_invitation_error)
