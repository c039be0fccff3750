"""Session Rules — join codes, player ordering, rating progress and beer-number checks.

Invariants:
    - Session codes use an alphabet without ambiguous characters (no 0/O, 1/I)
    - Players alternate direction by join order: even count -> ascending, odd -> descending
    - Progress counts any in-range rating, scored or not
    - check_beer_number is the only function here that raises

Design Decisions:
    - rng injected into generate_session_code so tests are deterministic
    - Name matching for resume is advisory: first trimmed, case-insensitive match wins
"""

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from uuid import UUID

from blindbeer.core.domain_types import OrderDirection
from blindbeer.core.errors import BeerNumberOutOfRangeError
from blindbeer.core.tasting_snapshot import PlayerEntry, RatingEntry

SESSION_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
SESSION_CODE_LENGTH = 6


@dataclass(frozen=True)
class PlayerProgress:
    player_id: UUID
    player_name: str
    order_direction: OrderDirection
    ratings_submitted: int
    beer_count: int
    next_beer: int | None

    @property
    def is_complete(self) -> bool:
        return self.beer_count > 0 and self.ratings_submitted >= self.beer_count


def generate_session_code(
    length: int = SESSION_CODE_LENGTH, rng: random.Random | None = None,
) -> str:
    chooser = rng or random.SystemRandom()
    return "".join(chooser.choice(SESSION_CODE_ALPHABET) for _ in range(length))


def normalize_session_code(code: str) -> str:
    return code.strip().upper()


def assign_order_direction(existing_player_count: int) -> OrderDirection:
    if existing_player_count % 2 == 0:
        return OrderDirection.ASCENDING
    return OrderDirection.DESCENDING


def beer_order(beer_count: int, direction: OrderDirection | str) -> list[int]:
    """Beer numbers in the order a player should taste them."""
    numbers = list(range(1, beer_count + 1))
    if OrderDirection(direction) is OrderDirection.DESCENDING:
        numbers.reverse()
    return numbers


def find_player_by_name(players: Iterable[PlayerEntry], name: str) -> PlayerEntry | None:
    wanted = name.strip().lower()
    for player in players:
        if player.name.strip().lower() == wanted:
            return player
    return None


def check_beer_number(beer_number: int, beer_count: int) -> None:
    """Raise BeerNumberOutOfRangeError unless 1 <= beer_number <= beer_count."""
    if not 1 <= beer_number <= beer_count:
        raise BeerNumberOutOfRangeError(beer_number, beer_count)


def player_progress(
    beer_count: int, player: PlayerEntry, ratings: Iterable[RatingEntry],
) -> PlayerProgress:
    rated = {
        r.beer_number for r in ratings
        if r.player_id == player.id and 1 <= r.beer_number <= beer_count
    }
    next_beer = next(
        (n for n in beer_order(beer_count, player.order_direction) if n not in rated),
        None,
    )
    return PlayerProgress(
        player_id=player.id,
        player_name=player.name,
        order_direction=player.order_direction,
        ratings_submitted=len(rated),
        beer_count=beer_count,
        next_beer=next_beer,
    )


def compute_player_progress(
    beer_count: int,
    players: Sequence[PlayerEntry],
    ratings: Sequence[RatingEntry],
) -> list[PlayerProgress]:
    """Progress for every player, in player order."""
    return [player_progress(beer_count, p, ratings) for p in players]
