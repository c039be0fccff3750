"""Player Routes — join, progress, rating submission and the player's reveal screen.

Invariants:
    - Player routes are scoped by {code}; a player id from another session is a 404
    - Joining with an existing name (any case) resumes that player (200, not 201)
    - The full player list is admin-only; a player sees only their own data
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.api.deps import get_tasting_session, require_admin
from blindbeer.core.beer_stats import compute_beer_stats
from blindbeer.core.domain_types import MAX_BEER_COUNT
from blindbeer.core.player_scorecard import build_group_comparison, build_player_scorecard
from blindbeer.core.session_rules import (
    beer_order, compute_player_progress, player_progress,
)
from blindbeer.core.tasting_snapshot import PlayerEntry, RatingEntry
from blindbeer.infrastructure.database import get_db
from blindbeer.models.session import TastingSession
from blindbeer.schemas.player import (
    PlayerDetailResponse, PlayerJoin, PlayerJoinResponse,
    PlayerProgressResponse, PlayerResponse,
)
from blindbeer.schemas.rating import RatingResponse, RatingSubmit
from blindbeer.schemas.results import (
    GroupComparisonRowResponse, PlayerRevealResponse, ScorecardResponse,
)
from blindbeer.services.handle_players import PlayerHandlers
from blindbeer.services.handle_ratings import RatingHandlers
from blindbeer.services.load_snapshot import load_snapshot

router = APIRouter(prefix="/api/v1/sessions", tags=["players"])


@router.post(
    "/{code}/players", response_model=PlayerJoinResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_session(
    body: PlayerJoin,
    response: Response,
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    player, resumed = await PlayerHandlers(db).join(
        session, body.name, body.order_direction,
    )
    if resumed:
        response.status_code = status.HTTP_200_OK
    return PlayerJoinResponse(
        player=PlayerResponse.model_validate(player),
        resumed=resumed,
        beer_order=beer_order(session.beer_count, player.order_direction),
    )


@router.get(
    "/{code}/players", response_model=list[PlayerProgressResponse],
    dependencies=[Depends(require_admin)],
)
async def list_players(
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    """Every player with rating progress (host view)."""
    snapshot = await load_snapshot(db, session)
    return [
        PlayerProgressResponse.model_validate(p)
        for p in compute_player_progress(
            snapshot.beer_count, snapshot.players, snapshot.ratings,
        )
    ]


@router.get("/{code}/players/{player_id}", response_model=PlayerDetailResponse)
async def get_player(
    player_id: UUID,
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    """Tasting order and progress for one player (play and done screens)."""
    player = await PlayerHandlers(db).get_player(session, player_id)
    ratings = await RatingHandlers(db).list_player_ratings(player)
    progress = player_progress(
        session.beer_count,
        PlayerEntry.from_row(player),
        [RatingEntry.from_row(r) for r in ratings],
    )
    return PlayerDetailResponse(
        player=PlayerResponse.model_validate(player),
        beer_order=beer_order(session.beer_count, player.order_direction),
        progress=PlayerProgressResponse.model_validate(progress),
    )


@router.get(
    "/{code}/players/{player_id}/ratings", response_model=list[RatingResponse],
)
async def list_player_ratings(
    player_id: UUID,
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    player = await PlayerHandlers(db).get_player(session, player_id)
    ratings = await RatingHandlers(db).list_player_ratings(player)
    return [RatingResponse.model_validate(r) for r in ratings]


@router.put(
    "/{code}/players/{player_id}/ratings/{beer_number}",
    response_model=RatingResponse,
)
async def submit_rating(
    player_id: UUID,
    body: RatingSubmit,
    beer_number: int = Path(ge=1, le=MAX_BEER_COUNT),
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    """Create or overwrite the player's rating for one beer."""
    player = await PlayerHandlers(db).get_player(session, player_id)
    rating = await RatingHandlers(db).submit_rating(session, player, beer_number, body)
    return RatingResponse.model_validate(rating)


@router.get(
    "/{code}/players/{player_id}/scorecard", response_model=PlayerRevealResponse,
)
async def get_player_scorecard(
    player_id: UUID,
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    """The reveal screen: the player's rankings and guesses against the group."""
    player = PlayerEntry.from_row(
        await PlayerHandlers(db).get_player(session, player_id),
    )
    snapshot = await load_snapshot(db, session)
    stats = compute_beer_stats(snapshot.beer_count, snapshot.ratings, snapshot.reveals)
    card = build_player_scorecard(player, snapshot.ratings, snapshot.reveals)
    return PlayerRevealResponse(
        scorecard=ScorecardResponse.model_validate(card),
        group_comparison=[
            GroupComparisonRowResponse.model_validate(row)
            for row in build_group_comparison(player, snapshot.ratings, stats)
        ],
    )
