"""
Pydantic schema definitions for API payloads.

Each entity (clients, guests) defines its own request and response
models; write acknowledgments shared by both live in ``ack``.  Schemas
are kept separate from the stored documents so that the wire format
(hex string identifiers) is decoupled from persistence (``ObjectId``).
"""

from pydantic import ValidationError as PydanticValidationError


def describe_errors(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``"field: message; ..."``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)
