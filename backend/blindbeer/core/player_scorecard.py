"""Player Scorecard — one player's rankings, guess results and averages.

Invariants:
    - Only the player's own ratings are considered
    - Rankings cover scored ratings only and are stable on beer number ascending
    - guess_accuracy lists every rating of the player, beer number ascending
    - Unrevealed beers are labelled "Beer #N"

Design Decisions:
    - One canonical builder shared by the reveal screen, the done screen and the
      printable scorecards (the three views differ only in what they render)
    - Group comparison reuses compute_beer_stats averages so "group" means the same
      thing on every screen
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from blindbeer.core.beer_stats import (
    BeerStat, beer_display_name, index_reveals, is_scored, mean,
)
from blindbeer.core.domain_types import GuessResult
from blindbeer.core.guess_accuracy import classify_guess, count_guesses, normalize_guess
from blindbeer.core.tasting_snapshot import (
    PlayerEntry, RatingEntry, RevealEntry, TastingSnapshot,
)


@dataclass(frozen=True)
class RankedBeer:
    beer_number: int
    name: str
    score: float


@dataclass(frozen=True)
class GuessCheck:
    beer_number: int
    beer_name: str
    guess: str
    result: GuessResult


@dataclass(frozen=True)
class Scorecard:
    """Per-player summary."""
    player_id: UUID
    player_name: str
    overall_ranked: list[RankedBeer] = field(default_factory=list)
    taste_ranked: list[RankedBeer] = field(default_factory=list)
    crush_ranked: list[RankedBeer] = field(default_factory=list)
    guess_accuracy: list[GuessCheck] = field(default_factory=list)
    avg_taste: float = 0.0
    avg_crush: float = 0.0
    correct_guesses: int = 0
    total_guesses: int = 0
    ratings_submitted: int = 0


@dataclass(frozen=True)
class GroupComparisonRow:
    """Player's score next to the group average for one beer."""
    beer_number: int
    name: str
    taste: int
    crush: int
    group_taste: float
    group_crush: float

    @property
    def taste_above_group(self) -> bool:
        return self.taste >= self.group_taste

    @property
    def crush_above_group(self) -> bool:
        return self.crush >= self.group_crush


def _player_ratings(player: PlayerEntry, ratings: Iterable[RatingEntry]) -> list[RatingEntry]:
    own = [r for r in ratings if r.player_id == player.id]
    return sorted(own, key=lambda r: r.beer_number)


def _ranked(scored: list[RatingEntry], names: dict[int, RevealEntry], score_of) -> list[RankedBeer]:
    items = [
        RankedBeer(r.beer_number, beer_display_name(r.beer_number, names), score_of(r))
        for r in scored
    ]
    return sorted(items, key=lambda item: item.score, reverse=True)


def build_player_scorecard(
    player: PlayerEntry,
    ratings: Iterable[RatingEntry],
    reveals: Iterable[RevealEntry],
) -> Scorecard:
    """Assemble a player's scorecard. Pure, no IO."""
    own = _player_ratings(player, ratings)
    scored = [r for r in own if is_scored(r)]
    names = index_reveals(reveals)
    correct, total = count_guesses(own, names)

    return Scorecard(
        player_id=player.id,
        player_name=player.name,
        overall_ranked=_ranked(scored, names, lambda r: (r.crushability + r.taste) / 2),
        taste_ranked=_ranked(scored, names, lambda r: r.taste),
        crush_ranked=_ranked(scored, names, lambda r: r.crushability),
        guess_accuracy=[
            GuessCheck(
                beer_number=r.beer_number,
                beer_name=beer_display_name(r.beer_number, names),
                guess=normalize_guess(r.guess),
                result=classify_guess(r.guess, names.get(r.beer_number)),
            )
            for r in own
        ],
        avg_taste=mean([r.taste for r in scored]),
        avg_crush=mean([r.crushability for r in scored]),
        correct_guesses=correct,
        total_guesses=total,
        ratings_submitted=len(own),
    )


def build_all_scorecards(snapshot: TastingSnapshot) -> list[Scorecard]:
    """One scorecard per player, in snapshot player order."""
    return [
        build_player_scorecard(player, snapshot.ratings, snapshot.reveals)
        for player in snapshot.players
    ]


def build_group_comparison(
    player: PlayerEntry,
    ratings: Iterable[RatingEntry],
    stats: Iterable[BeerStat],
) -> list[GroupComparisonRow]:
    """Line up each of the player's scored beers against the group averages."""
    by_number = {s.beer_number: s for s in stats}
    rows = []
    for rating in _player_ratings(player, ratings):
        if not is_scored(rating):
            continue
        stat = by_number.get(rating.beer_number)
        rows.append(GroupComparisonRow(
            beer_number=rating.beer_number,
            name=(stat.name if stat and stat.name else f"Beer #{rating.beer_number}"),
            taste=rating.taste,
            crush=rating.crushability,
            group_taste=stat.avg_taste if stat else 0.0,
            group_crush=stat.avg_crush if stat else 0.0,
        ))
    return rows
