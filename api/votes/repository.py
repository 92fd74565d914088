"""
Vote persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from candidates.repository import candidate_row
from core.db import Database, ExecResult


async def cast_vote(database: Database, *, voter_id: int, candidate_id: int) -> ExecResult:
    return await database.execute(
        """
        INSERT INTO votes (voter_id, candidate_id)
        VALUES (?, ?)
        """,
        voter_id,
        candidate_id,
    )


async def tally_votes(database: Database) -> list[dict[str, Any]]:
    """
    Leaderboard: one row per candidate that received votes, with the
    candidate's joined metadata and its vote count, highest count first.
    """
    rows = await database.fetch_all(
        """
        SELECT candidates.*, parties.name AS party_name, COUNT(votes.candidate_id) AS count
        FROM votes
        LEFT JOIN candidates ON votes.candidate_id = candidates.id
        LEFT JOIN parties ON candidates.party_id = parties.id
        GROUP BY votes.candidate_id
        ORDER BY count DESC, votes.candidate_id ASC
        """
    )
    return [candidate_row(r) for r in rows]
