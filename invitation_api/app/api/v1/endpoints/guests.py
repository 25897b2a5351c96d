"""
Guest endpoints for API v1.

CRUD routes for invitees.  A guest's ``client_id`` arrives as a hex
string and is converted to ``ObjectId`` here, at the HTTP boundary,
before the repository checks that the client exists.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from invitation_api.app.api.deps import get_guest_repository
from invitation_api.app.core.db import is_zero_id, parse_object_id
from invitation_api.app.core.exceptions import ValidationError
from invitation_api.app.repositories.guest_repository import GuestRepository
from invitation_api.app.schemas.ack import DeleteAck, InsertAck, UpdateAck
from invitation_api.app.schemas.guest import Guest, GuestCreate, GuestRead, GuestUpdate

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("", response_model=InsertAck, status_code=status.HTTP_201_CREATED)
def create_guest(
    payload: Dict[str, Any] = Body(...),
    repository: GuestRepository = Depends(get_guest_repository),
) -> InsertAck:
    """Create a guest for an existing client.

    The body is decoded twice: once into the typed guest fields and
    once as a raw mapping from which the textual ``client_id`` is
    taken and converted.  A missing client id is 400, an unknown one
    409.
    """
    guest_in = GuestCreate.from_payload(payload)
    raw_client_id = payload.get("client_id")
    if not isinstance(raw_client_id, str) or not raw_client_id:
        raise ValidationError("client_id must be a valid string")
    guest = Guest(**guest_in.model_dump(), client_id=parse_object_id(raw_client_id, "client_id"))
    return repository.create(guest)


@router.get("", response_model=List[GuestRead])
def list_guests(
    client_id: Optional[str] = Query(None),
    repository: GuestRepository = Depends(get_guest_repository),
) -> List[GuestRead]:
    """List the guests of one client; ``[]`` when it has none."""
    if not client_id:
        raise ValidationError("client_id is required")
    guests = repository.list_by_client(parse_object_id(client_id, "client_id"))
    if not guests:
        logger.info("No guests found for client %s", client_id)
    return guests


@router.get("/{guest_id}", response_model=GuestRead)
def get_guest(
    guest_id: str,
    repository: GuestRepository = Depends(get_guest_repository),
) -> GuestRead:
    return repository.get_by_id(parse_object_id(guest_id, "guest id"))


@router.put("/{guest_id}", response_model=UpdateAck)
def update_guest(
    guest_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: GuestRepository = Depends(get_guest_repository),
) -> UpdateAck:
    """Replace a guest's fields.

    The stored guest is fetched first (404 if it does not exist) so
    that an omitted or all‑zero ``client_id`` keeps its current value.
    Only when the client id is still zero after that is the request
    rejected.
    """
    oid = parse_object_id(guest_id, "guest id")
    guest_in = GuestUpdate.from_payload(payload)
    existing = repository.get_by_id(oid)

    client_id = parse_object_id(guest_in.client_id, "client_id") if guest_in.client_id else None
    if is_zero_id(client_id) and existing.client_id:
        client_id = parse_object_id(existing.client_id, "client_id")
    if is_zero_id(client_id):
        raise ValidationError("invalid client_id: client_id cannot be zero")

    guest = Guest(
        name=guest_in.name,
        message=guest_in.message,
        confirmation=guest_in.confirmation,
        client_id=client_id,
    )
    return repository.update(oid, guest)


@router.delete("/{guest_id}", response_model=DeleteAck)
def delete_guest(
    guest_id: str,
    repository: GuestRepository = Depends(get_guest_repository),
) -> DeleteAck:
    return repository.delete(parse_object_id(guest_id, "guest id"))
