"""Initial schema — sessions, players, ratings, beer_reveals.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "sessions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("code", sa.String(12), nullable=False),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("beer_count", sa.Integer, nullable=False),
        sa.Column("admin_password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("beer_count BETWEEN 1 AND 99", name="ck_sessions_beer_count"),
    )
    op.create_index("ix_sessions_code", "sessions", ["code"], unique=True)

    op.create_table(
        "players",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("session_id", UUID(as_uuid=True), sa.ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(60), nullable=False),
        sa.Column("order_direction", sa.String(10), nullable=False, server_default="ascending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_players_session_id", "players", ["session_id"])

    op.create_table(
        "ratings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("session_id", UUID(as_uuid=True), sa.ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("player_id", UUID(as_uuid=True), sa.ForeignKey("players.id", ondelete="CASCADE"), nullable=False),
        sa.Column("beer_number", sa.Integer, nullable=False),
        sa.Column("crushability", sa.Integer, nullable=True),
        sa.Column("taste", sa.Integer, nullable=True),
        sa.Column("guess", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("player_id", "beer_number", name="uq_ratings_player_beer"),
        sa.CheckConstraint("crushability IS NULL OR crushability BETWEEN 1 AND 10", name="ck_ratings_crushability"),
        sa.CheckConstraint("taste IS NULL OR taste BETWEEN 1 AND 10", name="ck_ratings_taste"),
    )
    op.create_index("ix_ratings_session_id", "ratings", ["session_id"])
    op.create_index("ix_ratings_player_id", "ratings", ["player_id"])

    op.create_table(
        "beer_reveals",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("session_id", UUID(as_uuid=True), sa.ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("beer_number", sa.Integer, nullable=False),
        sa.Column("beer_name", sa.String(200), nullable=False),
        sa.Column("brewery", sa.String(200), nullable=True),
        sa.Column("style", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("session_id", "beer_number", name="uq_beer_reveals_session_beer"),
    )
    op.create_index("ix_beer_reveals_session_id", "beer_reveals", ["session_id"])


def downgrade() -> None:
    op.drop_table("beer_reveals")
    op.drop_table("ratings")
    op.drop_table("players")
    op.drop_table("sessions")
