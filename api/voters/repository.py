"""
Voter persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ExecResult


async def list_voters(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all("SELECT * FROM voters ORDER BY last_name")


async def get_voter(database: Database, voter_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(
        "SELECT * FROM voters WHERE id = ?",
        voter_id,
    )


async def insert_voter(database: Database, *, first_name: str, last_name: str, email: str) -> ExecResult:
    return await database.execute(
        """
        INSERT INTO voters (first_name, last_name, email)
        VALUES (?, ?, ?)
        """,
        first_name,
        last_name,
        email,
    )


async def update_voter_email(database: Database, voter_id: int, *, email: str) -> ExecResult:
    return await database.execute(
        """
        UPDATE voters
        SET email = ?
        WHERE id = ?
        """,
        email,
        voter_id,
    )


async def delete_voter(database: Database, voter_id: int) -> ExecResult:
    return await database.execute(
        "DELETE FROM voters WHERE id = ?",
        voter_id,
    )
