"""Results Schemas — JSON views of the aggregation engine's dataclasses.

Invariants:
    - Read-only: built with model_validate(<core dataclass>) via from_attributes
    - has_scores travels with every BeerStat so clients can render "no ratings"
      instead of 0.0
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from blindbeer.core.domain_types import GuessResult
from blindbeer.schemas.player import PlayerProgressResponse


class _FromCore(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class BeerStatResponse(_FromCore):
    beer_number: int
    name: str | None
    avg_crush: float
    avg_taste: float
    combined: float
    rating_count: int
    scored_count: int
    has_scores: bool


class GuessAccuracyRowResponse(_FromCore):
    player_id: UUID
    player_name: str
    correct: int
    total: int
    ratio: float


class RankedBeerResponse(_FromCore):
    beer_number: int
    name: str
    score: float


class GuessCheckResponse(_FromCore):
    beer_number: int
    beer_name: str
    guess: str
    result: GuessResult


class ScorecardResponse(_FromCore):
    player_id: UUID
    player_name: str
    overall_ranked: list[RankedBeerResponse]
    taste_ranked: list[RankedBeerResponse]
    crush_ranked: list[RankedBeerResponse]
    guess_accuracy: list[GuessCheckResponse]
    avg_taste: float
    avg_crush: float
    correct_guesses: int
    total_guesses: int
    ratings_submitted: int


class GroupComparisonRowResponse(_FromCore):
    beer_number: int
    name: str
    taste: int
    crush: int
    group_taste: float
    group_crush: float
    taste_above_group: bool
    crush_above_group: bool


class PlayerRevealResponse(BaseModel):
    """Reveal screen: the player's scorecard next to the group."""
    scorecard: ScorecardResponse
    group_comparison: list[GroupComparisonRowResponse]


class SessionSummaryResponse(_FromCore):
    beer_count: int
    player_count: int
    rating_count: int
    revealed_count: int
    beer_stats: list[BeerStatResponse]
    overall_ranking: list[BeerStatResponse]
    taste_ranking: list[BeerStatResponse]
    crush_ranking: list[BeerStatResponse]
    guess_leaderboard: list[GuessAccuracyRowResponse]
    progress: list[PlayerProgressResponse]
