"""
Party API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from core.db import Database
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/parties")
async def list_parties(database: Database = Depends(get_db)) -> dict:
    return await service.list_parties(database)


@router.get("/party/{party_id}")
async def get_party(party_id: int, database: Database = Depends(get_db)) -> dict:
    return await service.get_party(database, party_id)


@router.post("/party")
async def create_party(
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_party(database, body)


@router.delete("/party/{party_id}")
async def delete_party(party_id: int, database: Database = Depends(get_db)) -> dict:
    """
    Remove a party. Candidates pointing at it are left as they are.
    """
    return await service.delete_party(database, party_id)
