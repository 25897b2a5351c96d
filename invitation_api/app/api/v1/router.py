"""
Top‑level router for version 1 of the API.

Aggregates the resource routers.  When a new resource is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import clients, guests, health

router = APIRouter()

router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(guests.router, prefix="/guests", tags=["guests"])
router.include_router(health.router, tags=["health"])
