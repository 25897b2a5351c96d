"""
Repository for clients (event hosts).

Provides CRUD operations over the ``clients`` collection, plus the
narrow :meth:`ClientRepository.exists` check the guest repository
relies on for referential integrity.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId

from ..core.db import Database, document_text
from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.ack import DeleteAck, InsertAck, UpdateAck
from ..schemas.client import ClientCreate, ClientRead, ClientUpdate


logger = logging.getLogger(__name__)


class ClientRepository:
    """CRUD access to the ``clients`` collection."""

    def __init__(self, database: Database) -> None:
        self._db = database
        self._collection = database.clients

    def create(self, client: ClientCreate) -> InsertAck:
        """Insert a new client and return the generated id.

        ``invitation_types`` must be non‑empty; the check happens before
        anything is written.
        """
        if not client.invitation_types:
            raise ValidationError("invitation_types cannot be empty")
        with self._db.operation(self._db.write_timeout):
            result = self._collection.insert_one(client.model_dump())
        logger.info("Created client %s", result.inserted_id)
        return InsertAck(inserted_id=str(result.inserted_id))

    def list(self) -> List[ClientRead]:
        """Return every client in storage order."""
        with self._db.operation():
            documents = list(self._collection.find({}))
        return [self._to_client_read(doc) for doc in documents]

    def get_by_id(self, client_id: ObjectId) -> ClientRead:
        with self._db.operation():
            document = self._collection.find_one({"_id": client_id})
        if document is None:
            raise NotFoundError(f"client {client_id} not found")
        return self._to_client_read(document)

    def exists(self, client_id: ObjectId) -> bool:
        """Point lookup used to validate guest references."""
        with self._db.operation(self._db.write_timeout):
            document = self._collection.find_one({"_id": client_id}, projection={"_id": 1})
        return document is not None

    def update(self, client_id: ObjectId, patch: ClientUpdate) -> UpdateAck:
        """Apply a field patch.

        Only the fields present in ``patch`` are written; everything else
        in the stored document is left as is.  An empty patch writes
        nothing but still reports whether the id matched.
        """
        changes = patch.changes()
        with self._db.operation():
            if changes:
                result = self._collection.update_one({"_id": client_id}, {"$set": changes})
                matched, modified = result.matched_count, result.modified_count
            else:
                matched = self._collection.count_documents({"_id": client_id})
                modified = 0
        if modified:
            logger.info("Updated client %s fields %s", client_id, sorted(changes))
        return UpdateAck(matched_count=matched, modified_count=modified)

    def delete(self, client_id: ObjectId) -> DeleteAck:
        """Remove a client.  Guests referencing it are left untouched."""
        with self._db.operation():
            result = self._collection.delete_one({"_id": client_id})
        if result.deleted_count:
            logger.info("Deleted client %s", client_id)
        return DeleteAck(deleted_count=result.deleted_count)

    @staticmethod
    def _to_client_read(document: Dict[str, Any]) -> ClientRead:
        return ClientRead(
            id=str(document["_id"]),
            name=document_text(document, "name"),
            contact=document_text(document, "contact"),
            invitation_types=document_text(document, "invitation_types"),
        )
