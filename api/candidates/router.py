"""
Candidate API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from core.db import Database
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/candidates")
async def list_candidates(database: Database = Depends(get_db)) -> dict:
    """
    All candidates with their party name (null when unaffiliated).
    """
    return await service.list_candidates(database)


@router.get("/candidate/{candidate_id}")
async def get_candidate(candidate_id: int, database: Database = Depends(get_db)) -> dict:
    return await service.get_candidate(database, candidate_id)


@router.post("/candidate")
async def create_candidate(
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_candidate(database, body)


@router.put("/candidate/{candidate_id}")
async def update_candidate_party(
    candidate_id: int,
    body: dict[str, Any] = Body(...),
    database: Database = Depends(get_db),
) -> dict:
    """
    Change party affiliation. `party_id` is the only updatable field.
    """
    return await service.update_candidate_party(database, candidate_id, body)


@router.delete("/candidate/{candidate_id}")
async def delete_candidate(candidate_id: int, database: Database = Depends(get_db)) -> dict:
    return await service.delete_candidate(database, candidate_id)
