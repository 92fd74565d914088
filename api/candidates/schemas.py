"""
Pydantic schemas for candidate endpoints.

Presence of required fields is checked by `core.validation.input_check`
before these models are applied; they only coerce types.
"""

from __future__ import annotations

from pydantic import BaseModel


class CandidateCreate(BaseModel):
    first_name: str
    last_name: str
    industry_connected: bool


class CandidatePartyUpdate(BaseModel):
    party_id: int
