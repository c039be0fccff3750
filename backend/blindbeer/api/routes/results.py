"""Results Routes — host dashboard, ranked beers and printable scorecards.

Invariants:
    - All results views are admin-only and recomputed from a fresh snapshot
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.api.deps import get_tasting_session, require_admin
from blindbeer.core.beer_stats import compute_beer_stats, rank_beers
from blindbeer.core.domain_types import RankBy
from blindbeer.core.player_scorecard import build_all_scorecards
from blindbeer.core.session_summary import summarize_session
from blindbeer.infrastructure.database import get_db
from blindbeer.models.session import TastingSession
from blindbeer.schemas.results import (
    BeerStatResponse, ScorecardResponse, SessionSummaryResponse,
)
from blindbeer.services.load_snapshot import load_snapshot

router = APIRouter(
    prefix="/api/v1/sessions", tags=["results"],
    dependencies=[Depends(require_admin)],
)


@router.get("/{code}/results", response_model=SessionSummaryResponse)
async def get_results(
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    snapshot = await load_snapshot(db, session)
    return SessionSummaryResponse.model_validate(summarize_session(snapshot))


@router.get("/{code}/results/beers", response_model=list[BeerStatResponse])
async def get_ranked_beers(
    rank_by: RankBy = Query(RankBy.COMBINED),
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    snapshot = await load_snapshot(db, session)
    stats = compute_beer_stats(snapshot.beer_count, snapshot.ratings, snapshot.reveals)
    return [BeerStatResponse.model_validate(s) for s in rank_beers(stats, rank_by)]


@router.get("/{code}/scorecards", response_model=list[ScorecardResponse])
async def get_scorecards(
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    snapshot = await load_snapshot(db, session)
    return [ScorecardResponse.model_validate(c) for c in build_all_scorecards(snapshot)]
