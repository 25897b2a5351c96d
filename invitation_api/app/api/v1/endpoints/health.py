"""
Health check endpoint.

Pings the document store so that load balancers notice a lost database
connection.  A failed ping is reported through the regular
``StoreError`` mapping (502, or 504 on timeout).
"""

from typing import Dict

from fastapi import APIRouter, Depends

from invitation_api.app.api.deps import get_database
from invitation_api.app.core.db import Database

router = APIRouter()


@router.get("/health", response_model=Dict[str, str])
def health(database: Database = Depends(get_database)) -> Dict[str, str]:
    database.ping()
    return {"status": "ok", "database": database.name}
