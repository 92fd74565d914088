import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from candidates import router as candidates_router
from core.db import Database
from core.errors import register_exception_handlers
from parties import router as parties_router
from voters import router as voters_router
from votes import router as votes_router

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The app only starts serving once the database is open.
    database = Database()
    await database.open()
    app.state.db = database
    try:
        yield
    finally:
        await database.close()


app = FastAPI(lifespan=lifespan)
register_exception_handlers(app)

app.include_router(candidates_router.router, prefix="/api", tags=["candidates"])
app.include_router(parties_router.router, prefix="/api", tags=["parties"])
app.include_router(voters_router.router, prefix="/api", tags=["voters"])
app.include_router(votes_router.router, prefix="/api", tags=["votes"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        app,
        host=os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
        port=_env_int("PORT", DEFAULT_PORT),
    )


if __name__ == "__main__":
    run()
