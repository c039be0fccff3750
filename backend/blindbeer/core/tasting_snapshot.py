"""Tasting Snapshot — immutable point-in-time copy of a session's players, ratings and reveals.

Invariants:
    - Every record is frozen; the engine never mutates its inputs
    - Collections are tuples so a snapshot is hashable and safe to share
    - from_row() reads attributes only (works for ORM rows, dataclasses, namespaces)

Design Decisions:
    - Snapshot records live in core, ORM models in models/: core never imports the shell
    - Scores kept as raw values (int | None): validity is decided by the engine, not here
"""

from dataclasses import dataclass, field
from uuid import UUID

from blindbeer.core.domain_types import OrderDirection


@dataclass(frozen=True)
class PlayerEntry:
    """A registered player."""
    id: UUID
    name: str
    order_direction: OrderDirection = OrderDirection.ASCENDING

    @classmethod
    def from_row(cls, row) -> "PlayerEntry":
        return cls(
            id=row.id,
            name=row.name,
            order_direction=OrderDirection(row.order_direction),
        )


@dataclass(frozen=True)
class RatingEntry:
    """One player's blind rating for one beer number."""
    player_id: UUID
    beer_number: int
    crushability: int | None = None
    taste: int | None = None
    guess: str | None = None
    notes: str | None = None

    @classmethod
    def from_row(cls, row) -> "RatingEntry":
        return cls(
            player_id=row.player_id,
            beer_number=row.beer_number,
            crushability=row.crushability,
            taste=row.taste,
            guess=row.guess,
            notes=row.notes,
        )


@dataclass(frozen=True)
class RevealEntry:
    """Host-entered identity of an anonymous beer number."""
    beer_number: int
    beer_name: str
    brewery: str | None = None
    style: str | None = None

    @classmethod
    def from_row(cls, row) -> "RevealEntry":
        return cls(
            beer_number=row.beer_number,
            beer_name=row.beer_name,
            brewery=row.brewery,
            style=row.style,
        )


@dataclass(frozen=True)
class TastingSnapshot:
    """Everything the aggregation engine needs for one session."""
    beer_count: int
    players: tuple[PlayerEntry, ...] = field(default_factory=tuple)
    ratings: tuple[RatingEntry, ...] = field(default_factory=tuple)
    reveals: tuple[RevealEntry, ...] = field(default_factory=tuple)
