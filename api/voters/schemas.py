"""
Pydantic schemas for voter endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class VoterCreate(BaseModel):
    first_name: str
    last_name: str
    email: str


class VoterEmailUpdate(BaseModel):
    email: str
