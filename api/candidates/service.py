"""
Candidate business logic.

Status policy:
- list read failures are server faults (500)
- single-row reads and writes are client-attributable (400)
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

CREATE_FIELDS = ("first_name", "last_name", "industry_connected")


def _client_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def list_candidates(database: Database) -> dict[str, Any]:
    try:
        rows = await repository.list_candidates(database)
    except DatabaseError as exc:
        logger.exception("candidate_list_failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return {"message": "success", "data": rows}


async def get_candidate(database: Database, candidate_id: int) -> dict[str, Any]:
    try:
        row = await repository.get_candidate(database, candidate_id)
    except DatabaseError as exc:
        logger.warning("candidate_get_failed id=%s error=%s", candidate_id, exc)
        raise _client_error(str(exc)) from exc
    # An absent row is still a success with null data.
    return {"message": "success", "data": row}


async def create_candidate(database: Database, body: dict[str, Any]) -> dict[str, Any]:
    error = input_check(body, *CREATE_FIELDS)
    if error:
        raise _client_error(error)

    payload = parse_body(schemas.CandidateCreate, body)
    try:
        result = await repository.insert_candidate(
            database,
            first_name=payload.first_name,
            last_name=payload.last_name,
            industry_connected=payload.industry_connected,
        )
    except DatabaseError as exc:
        logger.warning("candidate_insert_failed error=%s", exc)
        raise _client_error(str(exc)) from exc

    return {"message": "success", "data": echo_body(body, payload), "id": result.id}


async def update_candidate_party(database: Database, candidate_id: int, body: dict[str, Any]) -> dict[str, Any]:
    error = input_check(body, "party_id")
    if error:
        raise _client_error(error)

    payload = parse_body(schemas.CandidatePartyUpdate, body)
    try:
        result = await repository.update_candidate_party(database, candidate_id, party_id=payload.party_id)
    except DatabaseError as exc:
        logger.warning("candidate_update_failed id=%s error=%s", candidate_id, exc)
        raise _client_error(str(exc)) from exc

    return {"message": "success", "data": echo_body(body, payload), "changes": result.changes}


async def delete_candidate(database: Database, candidate_id: int) -> dict[str, Any]:
    try:
        result = await repository.delete_candidate(database, candidate_id)
    except DatabaseError as exc:
        logger.warning("candidate_delete_failed id=%s error=%s", candidate_id, exc)
        raise _client_error(str(exc)) from exc
    return {"message": "successfully deleted", "changes": result.changes}
