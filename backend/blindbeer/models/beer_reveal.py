"""BeerReveal ORM — the host's mapping from beer number to the real beer.

Invariants:
    - Unique per (session_id, beer_number): re-entry overwrites
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blindbeer.db.base import Base


class BeerReveal(Base):
    __tablename__ = "beer_reveals"
    __table_args__ = (
        UniqueConstraint("session_id", "beer_number", name="uq_beer_reveals_session_beer"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    session_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    beer_number: Mapped[int] = mapped_column(Integer, nullable=False)
    beer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    brewery: Mapped[str | None] = mapped_column(String(200), nullable=True)
    style: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
