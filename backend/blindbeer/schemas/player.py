"""Player Schemas — join request and player views."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blindbeer.core.domain_types import OrderDirection


class PlayerJoin(BaseModel):
    """Join by name; without an order_direction one is assigned by join order."""
    name: str = Field(min_length=1, max_length=60)
    order_direction: OrderDirection | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    order_direction: OrderDirection
    created_at: datetime


class PlayerProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    player_id: UUID
    player_name: str
    order_direction: OrderDirection
    ratings_submitted: int
    beer_count: int
    next_beer: int | None
    is_complete: bool


class PlayerDetailResponse(BaseModel):
    """A player with their tasting order and progress (play / done screens)."""
    player: PlayerResponse
    beer_order: list[int]
    progress: PlayerProgressResponse


class PlayerJoinResponse(BaseModel):
    player: PlayerResponse
    resumed: bool
    beer_order: list[int]
