"""
Pydantic models for guest (invitee) data.

A guest carries ``client_id``, a reference to the client hosting the
event.  On the wire it is a hex string; inside the application it is
an ``ObjectId``.  ``GuestCreate`` and ``GuestUpdate`` describe the
request bodies, ``Guest`` is the decoded record handed to the
repository with ``client_id`` already converted, and ``GuestRead`` is
the response shape.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from . import describe_errors


class GuestBase(BaseModel):
    name: str = Field("", examples=["Jo"])
    message: str = Field("", examples=["hi"])
    confirmation: str = Field("", examples=["yes"])

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]):
        """Decode an untyped JSON mapping into this schema.

        Schema failures are reported as a ``ValidationError`` (400)
        rather than FastAPI's default 422.
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(f"invalid request payload: {describe_errors(exc)}") from exc


class GuestCreate(GuestBase):
    """Typed view of a POST body.

    ``client_id`` is deliberately absent: it is extracted from the raw
    mapping and converted separately.
    """

    model_config = ConfigDict(extra="ignore")


class GuestUpdate(GuestBase):
    """PUT body.  Omitting ``client_id`` keeps the stored value."""

    client_id: Optional[str] = Field(None, examples=["6650c0ffee0000000000abcd"])


class Guest(GuestBase):
    """A guest ready to be written, with ``client_id`` as ``ObjectId``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client_id: Optional[ObjectId] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "confirmation": self.confirmation,
            "client_id": self.client_id,
        }


class GuestRead(GuestBase):
    """Schema for reading a guest from the API."""

    id: str
    client_id: str
