"""Reveal Handlers — the host's beer-number -> real beer mapping.

Invariants:
    - beer_number checked against the session's beer_count
    - Upsert keyed by (session_id, beer_number); re-entry overwrites
    - Reveals may change at any time, including after players have rated
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.core.errors import ErrorContext, ResourceNotFoundError
from blindbeer.core.session_rules import check_beer_number
from blindbeer.infrastructure.database import upsert
from blindbeer.models.beer_reveal import BeerReveal
from blindbeer.models.session import TastingSession
from blindbeer.schemas.reveal import RevealUpsert

logger = logging.getLogger(__name__)


class RevealHandlers:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_reveals(self, session: TastingSession) -> list[BeerReveal]:
        result = await self.db.execute(
            select(BeerReveal)
            .where(BeerReveal.session_id == session.id)
            .order_by(BeerReveal.beer_number),
        )
        return list(result.scalars().all())

    async def _get(self, session: TastingSession, beer_number: int) -> BeerReveal | None:
        result = await self.db.execute(
            select(BeerReveal)
            .where(
                BeerReveal.session_id == session.id,
                BeerReveal.beer_number == beer_number,
            )
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def upsert_reveal(
        self, session: TastingSession, beer_number: int, body: RevealUpsert,
    ) -> BeerReveal:
        check_beer_number(beer_number, session.beer_count)
        await upsert(
            self.db, BeerReveal,
            {
                "session_id": session.id,
                "beer_number": beer_number,
                "beer_name": body.beer_name,
                "brewery": body.brewery,
                "style": body.style,
            },
            conflict_columns=["session_id", "beer_number"],
        )
        await self.db.commit()
        logger.info(
            "Beer revealed",
            extra={"session_code": session.code, "beer_number": beer_number},
        )
        return await self._get(session, beer_number)

    async def delete_reveal(self, session: TastingSession, beer_number: int) -> None:
        reveal = await self._get(session, beer_number)
        if not reveal:
            raise ResourceNotFoundError(
                "Reveal", str(beer_number),
                ErrorContext(session_code=session.code, beer_number=beer_number),
            )
        await self.db.delete(reveal)
        await self.db.commit()
