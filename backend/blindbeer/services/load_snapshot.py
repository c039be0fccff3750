"""Snapshot Loader — reads one session's players, ratings and reveals into a TastingSnapshot.

Invariants:
    - Players ordered by join time, reveals by beer number, ratings by (player, beer)
    - The returned snapshot is detached from the DB session (plain frozen records)

Design Decisions:
    - Three flat queries by session_id instead of relationship loading
    - Recomputed on every request: no cache to invalidate when ratings or reveals change
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.core.tasting_snapshot import (
    PlayerEntry, RatingEntry, RevealEntry, TastingSnapshot,
)
from blindbeer.models.rating import Rating
from blindbeer.models.session import TastingSession
from blindbeer.services.handle_players import PlayerHandlers
from blindbeer.services.handle_reveals import RevealHandlers


async def load_snapshot(db: AsyncSession, session: TastingSession) -> TastingSnapshot:
    players = await PlayerHandlers(db).list_players(session)
    reveals = await RevealHandlers(db).list_reveals(session)
    result = await db.execute(
        select(Rating)
        .where(Rating.session_id == session.id)
        .order_by(Rating.player_id, Rating.beer_number),
    )
    return TastingSnapshot(
        beer_count=session.beer_count,
        players=tuple(PlayerEntry.from_row(p) for p in players),
        ratings=tuple(RatingEntry.from_row(r) for r in result.scalars().all()),
        reveals=tuple(RevealEntry.from_row(r) for r in reveals),
    )
