"""Reveal Schemas — host entry of real beer identities."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RevealUpsert(BaseModel):
    beer_name: str = Field(min_length=1, max_length=200)
    brewery: str | None = Field(None, max_length=200)
    style: str | None = Field(None, max_length=100)

    @field_validator("beer_name")
    @classmethod
    def strip_beer_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("beer_name cannot be empty or whitespace")
        return v

    @field_validator("brewery", "style")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class RevealResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    beer_number: int
    beer_name: str
    brewery: str | None
    style: str | None
    created_at: datetime
