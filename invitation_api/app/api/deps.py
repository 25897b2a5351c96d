"""
FastAPI dependencies.

The store handle is created once at startup and kept on
``app.state.database``; these helpers hand it, and repositories built
on it, to the route functions.  Tests swap the handle by passing a
different ``database_factory`` to ``create_app``.
"""

from fastapi import Depends, Request

from ..core.db import Database
from ..repositories.client_repository import ClientRepository
from ..repositories.guest_repository import GuestRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_client_repository(database: Database = Depends(get_database)) -> ClientRepository:
    return ClientRepository(database)


def get_guest_repository(
    database: Database = Depends(get_database),
    clients: ClientRepository = Depends(get_client_repository),
) -> GuestRepository:
    return GuestRepository(database, clients)
