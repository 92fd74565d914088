"""
Party persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ExecResult


async def list_parties(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all("SELECT * FROM parties")


async def get_party(database: Database, party_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(
        "SELECT * FROM parties WHERE id = ?",
        party_id,
    )


async def insert_party(database: Database, *, name: str, description: str | None = None) -> ExecResult:
    return await database.execute(
        """
        INSERT INTO parties (name, description)
        VALUES (?, ?)
        """,
        name,
        description,
    )


async def delete_party(database: Database, party_id: int) -> ExecResult:
    # Candidates keep their party_id; nothing cascades from here.
    return await database.execute(
        "DELETE FROM parties WHERE id = ?",
        party_id,
    )
