"""Session Handlers — create, look up, update and authenticate the host of a tasting.

Invariants:
    - Join codes are unique; a collision is retried with a fresh code, bounded by
      settings.session_code_max_attempts, then SessionCodeExhaustedError
    - Lookups normalize the code (trim + upper) before querying
    - Admin login compares against the bcrypt hash only

Design Decisions:
    - Collision detected by the unique index (IntegrityError on commit) rather than a
      pre-check: no window between check and insert
    - An IntegrityError is retried only when the code now exists; any other
      constraint failure is re-raised (DatabaseError at the session manager)
"""

import logging
import random

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.config import get_settings
from blindbeer.core.errors import (
    AdminAuthError, ErrorContext, ResourceNotFoundError, SessionCodeExhaustedError,
)
from blindbeer.core.session_rules import generate_session_code, normalize_session_code
from blindbeer.infrastructure.security import (
    create_admin_token, hash_password, verify_password,
)
from blindbeer.models.session import TastingSession
from blindbeer.schemas.session import SessionCreate, SessionUpdate

logger = logging.getLogger(__name__)


class SessionHandlers:
    """Tasting session lifecycle and admin authentication."""

    def __init__(self, db: AsyncSession, rng: random.Random | None = None):
        self.db = db
        self.rng = rng

    async def create_session(self, body: SessionCreate) -> TastingSession:
        settings = get_settings()
        password_hash = hash_password(body.admin_password)

        for attempt in range(1, settings.session_code_max_attempts + 1):
            code = generate_session_code(settings.session_code_length, self.rng)
            session = TastingSession(
                code=code,
                name=body.name,
                beer_count=body.beer_count,
                admin_password_hash=password_hash,
                is_active=True,
            )
            self.db.add(session)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                if not await self._code_taken(code):
                    raise
                logger.warning(
                    "Session code collision, retrying",
                    extra={"session_code": code, "attempt": attempt},
                )
                continue
            await self.db.refresh(session)
            logger.info(
                "Session created", extra={"session_code": session.code},
            )
            return session

        raise SessionCodeExhaustedError(settings.session_code_max_attempts)

    async def _code_taken(self, code: str) -> bool:
        result = await self.db.execute(
            select(TastingSession.id).where(TastingSession.code == code),
        )
        return result.first() is not None

    async def get_by_code(self, code: str) -> TastingSession:
        normalized = normalize_session_code(code)
        result = await self.db.execute(
            select(TastingSession).where(TastingSession.code == normalized),
        )
        session = result.scalar_one_or_none()
        if not session:
            raise ResourceNotFoundError(
                "Session", normalized, ErrorContext(session_code=normalized),
            )
        return session

    async def authenticate_admin(self, code: str, password: str) -> str:
        """Verify the host password and issue an admin token for this session."""
        session = await self.get_by_code(code)
        if not verify_password(password, session.admin_password_hash):
            logger.warning(
                "Admin login rejected", extra={"session_code": session.code},
            )
            raise AdminAuthError(
                "Wrong password", ErrorContext(session_code=session.code),
            )
        return create_admin_token(session.code)

    async def update_session(
        self, session: TastingSession, body: SessionUpdate,
    ) -> TastingSession:
        if body.name is not None:
            session.name = body.name
        if body.is_active is not None:
            session.is_active = body.is_active
        await self.db.commit()
        await self.db.refresh(session)
        return session
