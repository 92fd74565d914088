from __future__ import annotations

from pathlib import Path

import anyio
import pytest
from fastapi.testclient import TestClient

from core.db import Database

ROOT = Path(__file__).resolve().parents[1]
SCHEMA_SQL = (ROOT / "db" / "schema.sql").read_text()


async def _load_schema(path: Path) -> None:
    handle = Database(str(path))
    await handle.open()
    try:
        await handle.execute_script(SCHEMA_SQL)
    finally:
        await handle.close()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "election.db"
    anyio.run(_load_schema, path)
    return path


@pytest.fixture
def client(db_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_PATH", str(db_path))

    from main import app

    # Entering the context runs the lifespan, which opens the database.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run_sql(client):
    """Run raw SQL on the app's own connection, inside the app's event loop."""

    def run(script: str) -> None:
        client.portal.call(client.app.state.db.execute_script, script)

    return run


@pytest.fixture
async def database(db_path: Path):
    handle = Database(str(db_path))
    await handle.open()
    try:
        yield handle
    finally:
        await handle.close()
