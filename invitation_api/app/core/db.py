"""
MongoDB integration.

This module owns the document store handle.  ``connect_with_retry``
builds a :class:`Database` at application startup, pinging the server
and retrying a fixed number of times with a linear backoff.  The
resulting handle is stored on ``app.state`` and injected into the
repositories for every request; nothing here is a module level
connection.

Every store call made by a repository runs inside
:meth:`Database.operation`, which bounds it with ``pymongo.timeout``
and translates driver exceptions into :class:`StoreError`.

Identifiers travel over HTTP as 24 character hex strings;
:func:`parse_object_id` converts them to ``ObjectId`` at the boundary.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

import pymongo
from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings, settings
from .exceptions import MalformedIdentifierError, StoreError


logger = logging.getLogger(__name__)

CLIENTS_COLLECTION = "clients"
GUESTS_COLLECTION = "guests"

ZERO_ID = ObjectId(b"\x00" * 12)


def parse_object_id(value: Any, field: str = "id") -> ObjectId:
    """Convert the wire representation of an identifier to ``ObjectId``.

    Raises ``MalformedIdentifierError`` for anything that is not a 24
    character hex string.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise MalformedIdentifierError(f"invalid {field}: {value!r} is not a valid identifier")
    return ObjectId(value)


def is_zero_id(value: Optional[ObjectId]) -> bool:
    """True when ``value`` is unset or the all‑zero ObjectId."""
    return value is None or value == ZERO_ID


def document_text(document: Dict[str, Any], key: str) -> str:
    """Read a string field from a stored document.

    The collections are schemaless, so a field written by another tool
    may be missing, null or of another type.  Missing and null read as
    ``""``; anything else is rendered with ``str``.
    """
    value = document.get(key)
    return "" if value is None else str(value)


class Database:
    """Handle on the invitation database and its two collections."""

    def __init__(
        self,
        client: MongoClient,
        name: str,
        timeout: float = 10.0,
        write_timeout: float = 5.0,
    ) -> None:
        self.client = client
        self.name = name
        self.timeout = timeout
        self.write_timeout = write_timeout
        self._db = client[name]

    @property
    def clients(self) -> Collection:
        return self._db[CLIENTS_COLLECTION]

    @property
    def guests(self) -> Collection:
        return self._db[GUESTS_COLLECTION]

    @contextmanager
    def operation(self, seconds: Optional[float] = None) -> Iterator[None]:
        """Bound a store call and translate driver failures.

        Cursor iteration must happen inside the ``with`` block so that
        it is covered by the same deadline.
        """
        with pymongo.timeout(seconds if seconds is not None else self.timeout):
            try:
                yield
            except PyMongoError as exc:
                raise StoreError.from_driver(exc) from exc

    def ping(self) -> None:
        with self.operation():
            self._db.command("ping")

    def close(self) -> None:
        self.client.close()


def connect_with_retry(
    config: Settings = settings,
    *,
    client_factory: Callable[..., MongoClient] = MongoClient,
    sleep: Callable[[float], None] = time.sleep,
) -> Database:
    """Connect to MongoDB, retrying with a linear backoff.

    Each attempt creates a client and pings the server.  After failed
    attempt ``n`` the function sleeps ``n * config.connect_backoff_seconds``
    seconds.  When every attempt fails a ``StoreError`` carrying the
    last failure is raised.
    """
    attempts = max(config.connect_retries, 1)
    last_error: Optional[Exception] = None
    for attempt in range(1, attempts + 1):
        client = None
        try:
            client = client_factory(
                config.mongo_uri,
                serverSelectionTimeoutMS=10_000,
                connectTimeoutMS=15_000,
                socketTimeoutMS=30_000,
            )
            database = Database(
                client,
                config.db_name,
                timeout=config.store_timeout_seconds,
                write_timeout=config.store_write_timeout_seconds,
            )
            database.ping()
        except (PyMongoError, StoreError) as exc:
            last_error = exc
            logger.warning("Failed to connect to MongoDB on attempt %d: %s", attempt, exc)
            if client is not None:
                client.close()
            if attempt < attempts:
                sleep(attempt * config.connect_backoff_seconds)
            continue
        logger.info("Connected to MongoDB database '%s' on attempt %d", config.db_name, attempt)
        return database

    raise StoreError(f"could not connect to MongoDB after {attempts} attempts: {last_error}")
