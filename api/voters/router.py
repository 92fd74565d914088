"""
Voter API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from core.db import Database
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/voters")
async def list_voters(database: Database = Depends(get_db)) -> dict:
    """
    All registered voters, ordered by last name.
    """
    return await service.list_voters(database)


@router.get("/voter/{voter_id}")
async def get_voter(voter_id: int, database: Database = Depends(get_db)) -> dict:
    return await service.get_voter(database, voter_id)


@router.post("/voter")
async def register_voter(
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    return await service.register_voter(database, body)


@router.put("/voter/{voter_id}")
async def update_voter_email(
    voter_id: int,
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_voter_email(database, voter_id, body)


@router.delete("/voter/{voter_id}")
async def delete_voter(voter_id: int, database: Database = Depends(get_db)) -> dict:
    return await service.delete_voter(database, voter_id)
