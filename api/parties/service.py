"""
Party business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core.db import Database, DatabaseError
from core.errors import echo_body, parse_body
from core.validation import input_check

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_parties(database: Database) -> dict[str, Any]:
    try:
        rows = await repository.list_parties(database)
    except DatabaseError as exc:
        logger.exception("party_list_failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return {"message": "success", "data": rows}


async def get_party(database: Database, party_id: int) -> dict[str, Any]:
    try:
        row = await repository.get_party(database, party_id)
    except DatabaseError as exc:
        logger.warning("party_get_failed id=%s error=%s", party_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "success", "data": row}


async def create_party(database: Database, body: dict[str, Any]) -> dict[str, Any]:
    error = input_check(body, "name")
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    payload = parse_body(schemas.PartyCreate, body)
    try:
        result = await repository.insert_party(database, name=payload.name, description=payload.description)
    except DatabaseError as exc:
        logger.warning("party_insert_failed error=%s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return {
        "message": "success",
        "data": echo_body(body, payload),
        "id": result.id,
    }


async def delete_party(database: Database, party_id: int) -> dict[str, Any]:
    try:
        result = await repository.delete_party(database, party_id)
    except DatabaseError as exc:
        logger.warning("party_delete_failed id=%s error=%s", party_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "deleted", "changes": result.changes}
