"""Rating Handlers — blind rating upserts for one player.

Invariants:
    - beer_number checked against the session's beer_count before any write
    - Upsert keyed by (player_id, beer_number); the submitted body replaces the row
    - Concurrent submissions are last-write-wins (no locking)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.core.errors import BeerNumberOutOfRangeError
from blindbeer.core.session_rules import check_beer_number
from blindbeer.infrastructure.database import upsert
from blindbeer.models.player import Player
from blindbeer.models.rating import Rating
from blindbeer.models.session import TastingSession
from blindbeer.schemas.rating import RatingSubmit

logger = logging.getLogger(__name__)


class RatingHandlers:
    """Write and read one player's ratings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit_rating(
        self,
        session: TastingSession,
        player: Player,
        beer_number: int,
        body: RatingSubmit,
    ) -> Rating:
        # ── PURE: validate against the session ──
        try:
            check_beer_number(beer_number, session.beer_count)
        except BeerNumberOutOfRangeError as e:
            e.context.session_code = session.code
            e.context.player_id = str(player.id)
            raise

        # ── IMPURE: upsert, then read back the stored row ──
        await upsert(
            self.db, Rating,
            {
                "session_id": session.id,
                "player_id": player.id,
                "beer_number": beer_number,
                "crushability": body.crushability,
                "taste": body.taste,
                "guess": body.guess,
                "notes": body.notes,
            },
            conflict_columns=["player_id", "beer_number"],
        )
        await self.db.commit()
        logger.info(
            "Rating saved",
            extra={
                "session_code": session.code,
                "player_id": player.id,
                "beer_number": beer_number,
            },
        )
        result = await self.db.execute(
            select(Rating)
            .where(Rating.player_id == player.id, Rating.beer_number == beer_number)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one()

    async def list_player_ratings(self, player: Player) -> list[Rating]:
        result = await self.db.execute(
            select(Rating)
            .where(Rating.player_id == player.id)
            .order_by(Rating.beer_number),
        )
        return list(result.scalars().all())
