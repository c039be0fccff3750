"""Player Handlers — join or resume a tasting, look up players.

Invariants:
    - Inactive sessions accept no new joins (SessionInactiveError)
    - A trimmed, case-insensitive name match resumes the existing player
    - A new player tastes in the direction they chose; without a choice,
      directions alternate by join order
    - The alternation is advisory: two simultaneous first joins can both read a
      player count of 0 and both start ascending (no lock taken)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.core.domain_types import OrderDirection
from blindbeer.core.errors import (
    ErrorContext, ResourceNotFoundError, SessionInactiveError,
)
from blindbeer.core.session_rules import assign_order_direction, find_player_by_name
from blindbeer.core.tasting_snapshot import PlayerEntry
from blindbeer.models.player import Player
from blindbeer.models.session import TastingSession

logger = logging.getLogger(__name__)


class PlayerHandlers:
    """Player registration and lookup within one session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_players(self, session: TastingSession) -> list[Player]:
        result = await self.db.execute(
            select(Player)
            .where(Player.session_id == session.id)
            .order_by(Player.created_at, Player.id),
        )
        return list(result.scalars().all())

    async def join(
        self,
        session: TastingSession,
        name: str,
        order_direction: OrderDirection | None = None,
    ) -> tuple[Player, bool]:
        """Return (player, resumed). A resumed player keeps their original direction."""
        if not session.is_active:
            raise SessionInactiveError(session.code)

        players = await self.list_players(session)

        # ── PURE: resume or pick a direction ──
        match = find_player_by_name([PlayerEntry.from_row(p) for p in players], name)
        if match:
            existing = next(p for p in players if p.id == match.id)
            logger.info(
                "Player resumed",
                extra={"session_code": session.code, "player_id": existing.id},
            )
            return existing, True
        direction = order_direction or assign_order_direction(len(players))

        # ── IMPURE: insert ──
        player = Player(
            session_id=session.id, name=name, order_direction=direction.value,
        )
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)
        logger.info(
            "Player joined",
            extra={"session_code": session.code, "player_id": player.id},
        )
        return player, False

    async def get_player(self, session: TastingSession, player_id: UUID) -> Player:
        result = await self.db.execute(
            select(Player).where(
                Player.id == player_id, Player.session_id == session.id,
            ),
        )
        player = result.scalar_one_or_none()
        if not player:
            raise ResourceNotFoundError(
                "Player", str(player_id),
                ErrorContext(session_code=session.code, player_id=str(player_id)),
            )
        return player
