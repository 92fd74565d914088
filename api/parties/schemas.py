"""
Pydantic schemas for party endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class PartyCreate(BaseModel):
    name: str
    description: str | None = None
