"""Session ORM — a hosted tasting that players join by code.

Invariants:
    - id is UUID primary key
    - code is unique and upper-case
    - beer_count bounds valid beer numbers to 1..beer_count
    - admin_password_hash is a bcrypt hash, never the plaintext

Design Decisions:
    - No ORM relationships: results are read as flat snapshots by session_id,
      which avoids lazy loads in async context
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blindbeer.db.base import Base


class TastingSession(Base):
    """Session aggregate root — owns players, ratings and reveals."""
    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint("beer_count BETWEEN 1 AND 99", name="ck_sessions_beer_count"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    code: Mapped[str] = mapped_column(
        String(12), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    beer_count: Mapped[int] = mapped_column(Integer, nullable=False)
    admin_password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
