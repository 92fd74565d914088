"""
Vote business logic.
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


async def cast_vote(database: Database, body: dict[str, Any]) -> dict[str, Any]:
    error = input_check(body, "voter_id", "candidate_id")
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    payload = parse_body(schemas.VoteCreate, body)
    try:
        result = await repository.cast_vote(
            database,
            voter_id=payload.voter_id,
            candidate_id=payload.candidate_id,
        )
    except DatabaseError as exc:
        # Most often the one-vote-per-voter constraint.
        logger.warning("vote_insert_failed voter_id=%s error=%s", payload.voter_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("vote_cast id=%s candidate_id=%s", result.id, payload.candidate_id)
    return {"message": "success", "data": echo_body(body, payload), "id": result.id}


async def tally_votes(database: Database) -> dict[str, Any]:
    try:
        rows = await repository.tally_votes(database)
    except DatabaseError as exc:
        logger.exception("vote_tally_failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return {"message": "success", "data": rows}
