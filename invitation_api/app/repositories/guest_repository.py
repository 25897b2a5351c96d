"""
Repository for guests (invitees).

Guests reference a client through ``client_id``.  The reference is
checked on every write through a :class:`ClientLookup`, normally the
:class:`~invitation_api.app.repositories.client_repository.ClientRepository`.
The check and the write are separate store calls with no transaction
around them: a client deleted in between goes unnoticed.  Deleting a
client never touches its guests.
"""

import logging
from typing import Any, Dict, List, Protocol

from bson import ObjectId

from ..core.db import Database, document_text, is_zero_id
from ..core.exceptions import NotFoundError, UnknownReferenceError, ValidationError
from ..schemas.ack import DeleteAck, InsertAck, UpdateAck
from ..schemas.guest import Guest, GuestRead


logger = logging.getLogger(__name__)


class ClientLookup(Protocol):
    def exists(self, client_id: ObjectId) -> bool: ...


class GuestRepository:
    """CRUD access to the ``guests`` collection."""

    def __init__(self, database: Database, clients: ClientLookup) -> None:
        self._db = database
        self._collection = database.guests
        self._clients = clients

    def create(self, guest: Guest) -> InsertAck:
        """Insert a guest after checking its client reference.

        Raises ``ValidationError`` for a missing or zero ``client_id``
        (before any store call) and ``UnknownReferenceError`` when the
        client does not exist (nothing is inserted).
        """
        self._check_reference(guest)
        with self._db.operation(self._db.write_timeout):
            result = self._collection.insert_one(guest.to_document())
        logger.info("Created guest %s for client %s", result.inserted_id, guest.client_id)
        return InsertAck(inserted_id=str(result.inserted_id))

    def list_by_client(self, client_id: ObjectId) -> List[GuestRead]:
        """Guests of one client; no match is an empty list."""
        with self._db.operation():
            documents = list(self._collection.find({"client_id": client_id}))
        return [self._to_guest_read(doc) for doc in documents]

    def get_by_id(self, guest_id: ObjectId) -> GuestRead:
        with self._db.operation():
            document = self._collection.find_one({"_id": guest_id})
        if document is None:
            raise NotFoundError(f"guest {guest_id} not found")
        return self._to_guest_read(document)

    def update(self, guest_id: ObjectId, guest: Guest) -> UpdateAck:
        """Overwrite every mutable field of a guest.

        Unlike the client update this is not a patch: ``name``,
        ``message``, ``confirmation`` and ``client_id`` are all written.
        The caller fills ``client_id`` from the stored guest when the
        request omits it.
        """
        self._check_reference(guest)
        with self._db.operation():
            result = self._collection.update_one({"_id": guest_id}, {"$set": guest.to_document()})
        if result.modified_count:
            logger.info("Updated guest %s", guest_id)
        return UpdateAck(matched_count=result.matched_count, modified_count=result.modified_count)

    def delete(self, guest_id: ObjectId) -> DeleteAck:
        with self._db.operation():
            result = self._collection.delete_one({"_id": guest_id})
        if result.deleted_count:
            logger.info("Deleted guest %s", guest_id)
        return DeleteAck(deleted_count=result.deleted_count)

    def _check_reference(self, guest: Guest) -> None:
        if is_zero_id(guest.client_id):
            raise ValidationError("invalid client_id: client_id cannot be zero")
        if not self._clients.exists(guest.client_id):
            raise UnknownReferenceError(f"client with ID {guest.client_id} does not exist")

    @staticmethod
    def _to_guest_read(document: Dict[str, Any]) -> GuestRead:
        return GuestRead(
            id=str(document["_id"]),
            name=document_text(document, "name"),
            message=document_text(document, "message"),
            confirmation=document_text(document, "confirmation"),
            client_id=document_text(document, "client_id"),
        )
