"""
Candidate persistence (raw SQL).

`industry_connected` is stored as 0/1 and leaves this module as a bool.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ExecResult

_SELECT_JOINED = """
    SELECT candidates.*, parties.name AS party_name
    FROM candidates
    LEFT JOIN parties
      ON candidates.party_id = parties.id
"""


def _to_storage_flag(value: bool) -> int:
    return 1 if value else 0


def candidate_row(row: dict[str, Any]) -> dict[str, Any]:
    flag = row.get("industry_connected")
    if flag is not None:
        row["industry_connected"] = bool(flag)
    return row


async def list_candidates(database: Database) -> list[dict[str, Any]]:
    rows = await database.fetch_all(_SELECT_JOINED)
    return [candidate_row(r) for r in rows]


async def get_candidate(database: Database, candidate_id: int) -> dict[str, Any] | None:
    row = await database.fetch_one(
        _SELECT_JOINED + "WHERE candidates.id = ?",
        candidate_id,
    )
    return candidate_row(row) if row is not None else None


async def insert_candidate(
    database: Database,
    *,
    first_name: str,
    last_name: str,
    industry_connected: bool,
) -> ExecResult:
    return await database.execute(
        """
        INSERT INTO candidates (first_name, last_name, industry_connected)
        VALUES (?, ?, ?)
        """,
        first_name,
        last_name,
        _to_storage_flag(industry_connected),
    )


async def update_candidate_party(database: Database, candidate_id: int, *, party_id: int) -> ExecResult:
    return await database.execute(
        """
        UPDATE candidates
        SET party_id = ?
        WHERE id = ?
        """,
        party_id,
        candidate_id,
    )


async def delete_candidate(database: Database, candidate_id: int) -> ExecResult:
    return await database.execute(
        "DELETE FROM candidates WHERE id = ?",
        candidate_id,
    )
