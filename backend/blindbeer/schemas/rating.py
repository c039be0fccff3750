"""Rating Schemas — write-path validation for blind ratings.

Invariants:
    - crushability / taste: integers 1..10 or null, strict: JSON true/false and "7"
      are rejected, never coerced to a score
    - guess / notes: stripped; empty string stored as null
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blindbeer.core.domain_types import SCORE_MAX, SCORE_MIN


class RatingSubmit(BaseModel):
    """Full replacement of a player's rating for one beer."""
    crushability: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX, strict=True)
    taste: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX, strict=True)
    guess: str | None = Field(None, max_length=200)
    notes: str | None = Field(None, max_length=2000)

    @field_validator("guess", "notes")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class RatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    player_id: UUID
    beer_number: int
    crushability: int | None
    taste: int | None
    guess: str | None
    notes: str | None
    created_at: datetime
