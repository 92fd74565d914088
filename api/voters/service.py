"""
Voter business logic.
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


async def list_voters(database: Database) -> dict[str, Any]:
    try:
        rows = await repository.list_voters(database)
    except DatabaseError as exc:
        logger.exception("voter_list_failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return {"message": "success", "data": rows}


async def get_voter(database: Database, voter_id: int) -> dict[str, Any]:
    try:
        row = await repository.get_voter(database, voter_id)
    except DatabaseError as exc:
        logger.warning("voter_get_failed id=%s error=%s", voter_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "success", "data": row}


async def register_voter(database: Database, body: dict[str, Any]) -> dict[str, Any]:
    # Blank records never reach the table.
    error = input_check(body, "first_name", "last_name", "email")
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    payload = parse_body(schemas.VoterCreate, body)
    try:
        result = await repository.insert_voter(
            database,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
        )
    except DatabaseError as exc:
        logger.warning("voter_insert_failed error=%s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return {"message": "success", "data": echo_body(body, payload), "id": result.id}


async def update_voter_email(database: Database, voter_id: int, body: dict[str, Any]) -> dict[str, Any]:
    error = input_check(body, "email")
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    payload = parse_body(schemas.VoterEmailUpdate, body)
    try:
        result = await repository.update_voter_email(database, voter_id, email=payload.email)
    except DatabaseError as exc:
        logger.warning("voter_update_failed id=%s error=%s", voter_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return {"message": "success", "data": echo_body(body, payload), "changes": result.changes}


async def delete_voter(database: Database, voter_id: int) -> dict[str, Any]:
    try:
        result = await repository.delete_voter(database, voter_id)
    except DatabaseError as exc:
        logger.warning("voter_delete_failed id=%s error=%s", voter_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "deleted", "changes": result.changes}
