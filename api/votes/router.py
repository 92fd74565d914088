"""
Vote API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from core.db import Database
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.post("/vote")
async def cast_vote(
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    return await service.cast_vote(database, body)


@router.get("/vote")
async def tally_votes(database: Database = Depends(get_db)) -> dict:
    """
    Vote counts per candidate, highest first.
    """
    return await service.tally_votes(database)
