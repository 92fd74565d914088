"""
Pydantic schemas for vote endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class VoteCreate(BaseModel):
    voter_id: int
    candidate_id: int
