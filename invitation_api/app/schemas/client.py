"""
Pydantic models for client (event host) data.

``ClientBase`` holds the stored fields, ``ClientCreate`` is the POST
body and ``ClientRead`` adds the generated ``id``.  ``ClientUpdate`` is
the field patch accepted by PUT: a closed set of optional fields where
only the keys actually sent are applied.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from . import describe_errors


class ClientBase(BaseModel):
    name: str = Field("", examples=["Acme"])
    contact: str = Field("", examples=["a@b.com"])
    invitation_types: str = Field("", examples=["wedding"])


class ClientCreate(ClientBase):
    """Schema for creating a client.

    ``invitation_types`` defaults to an empty string so that a missing
    value reaches the handler's explicit check and is reported as a
    validation error rather than a schema error.
    """


class ClientRead(ClientBase):
    """Schema for reading a client from the API."""

    id: str


class ClientUpdate(BaseModel):
    """Field patch for a client.

    All fields are optional; only the keys present in the request are
    written.  Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    contact: Optional[str] = None
    invitation_types: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClientUpdate":
        """Validate an untyped JSON mapping against the client fields."""
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(f"invalid client update: {describe_errors(exc)}") from exc

    def changes(self) -> Dict[str, str]:
        """Return the fields to ``$set``.

        Explicit ``null`` values and an empty ``invitation_types`` are
        rejected because a stored client always has string fields and a
        non‑empty invitation type.
        """
        fields = self.model_dump(exclude_unset=True)
        for key, value in fields.items():
            if value is None:
                raise ValidationError(f"{key} cannot be null")
        if fields.get("invitation_types") == "":
            raise ValidationError("invitation_types cannot be empty")
        return fields

