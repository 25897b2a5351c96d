"""
Client endpoints for API v1.

CRUD routes for event hosts.  Identifiers in the path are parsed into
``ObjectId`` before any query; a malformed id answers 400.  Updates
accept a partial mapping: only the fields sent are changed.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from invitation_api.app.api.deps import get_client_repository
from invitation_api.app.core.db import parse_object_id
from invitation_api.app.core.exceptions import ValidationError
from invitation_api.app.repositories.client_repository import ClientRepository
from invitation_api.app.schemas.ack import DeleteAck, InsertAck, UpdateAck
from invitation_api.app.schemas.client import ClientCreate, ClientRead, ClientUpdate

router = APIRouter()


@router.post("", response_model=InsertAck, status_code=status.HTTP_201_CREATED)
def create_client(
    client_in: ClientCreate,
    repository: ClientRepository = Depends(get_client_repository),
) -> InsertAck:
    """Create a client.

    ``invitation_types`` is required and must not be empty; the request
    is rejected with 400 before anything is stored.
    """
    if not client_in.invitation_types:
        raise ValidationError("invitation_types cannot be empty")
    return repository.create(client_in)


@router.get("", response_model=List[ClientRead])
def list_clients(repository: ClientRepository = Depends(get_client_repository)) -> List[ClientRead]:
    """Return all clients.  An empty collection yields ``[]``."""
    return repository.list()


@router.get("/{client_id}", response_model=ClientRead)
def get_client(
    client_id: str,
    repository: ClientRepository = Depends(get_client_repository),
) -> ClientRead:
    return repository.get_by_id(parse_object_id(client_id, "client id"))


@router.put("/{client_id}", response_model=UpdateAck)
def update_client(
    client_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: ClientRepository = Depends(get_client_repository),
) -> UpdateAck:
    """Update only the fields present in the body.

    The body is read as a plain mapping and then validated against the
    closed set of client fields, so unknown keys and non‑string values
    are rejected with 400.
    """
    oid = parse_object_id(client_id, "client id")
    patch = ClientUpdate.from_payload(payload)
    return repository.update(oid, patch)


@router.delete("/{client_id}", response_model=DeleteAck)
def delete_client(
    client_id: str,
    repository: ClientRepository = Depends(get_client_repository),
) -> DeleteAck:
    """Delete a client.  Its guests are not removed."""
    return repository.delete(parse_object_id(client_id, "client id"))
