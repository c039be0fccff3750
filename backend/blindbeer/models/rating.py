"""Rating ORM — one player's blind scores, guess and notes for one beer number.

Invariants:
    - Unique per (player_id, beer_number): resubmission overwrites, never duplicates
    - crushability / taste are 1..10 or NULL (checked at the DB as well as the API)

Design Decisions:
    - No history table: the latest upsert is the rating
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Integer, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blindbeer.db.base import Base


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("player_id", "beer_number", name="uq_ratings_player_beer"),
        CheckConstraint(
            "crushability IS NULL OR crushability BETWEEN 1 AND 10",
            name="ck_ratings_crushability",
        ),
        CheckConstraint(
            "taste IS NULL OR taste BETWEEN 1 AND 10", name="ck_ratings_taste",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    session_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    player_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    beer_number: Mapped[int] = mapped_column(Integer, nullable=False)
    crushability: Mapped[int | None] = mapped_column(Integer, nullable=True)
    taste: Mapped[int | None] = mapped_column(Integer, nullable=True)
    guess: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
