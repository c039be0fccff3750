"""Beer Stats — per-beer averages, combined score and rankings over a rating snapshot.

Invariants:
    - compute_beer_stats returns exactly beer_count entries, beer numbers 1..beer_count ascending
    - Averages are over "scored" ratings only (both crushability and taste valid)
    - A beer with no scored ratings has all-zero averages; scored_count is the only
      reliable "unrated" signal, never combined == 0
    - rank_beers is a stable descending sort: equal values keep input order

Design Decisions:
    - Invalid scores (outside 1..10, non-int, bool) are treated as absent rather than
      clamped: a corrupt value never shifts an average
    - Reveal lookup keeps the first reveal per beer number
"""

from collections.abc import Iterable
from dataclasses import dataclass

from blindbeer.core.domain_types import RankBy, SCORE_MAX, SCORE_MIN
from blindbeer.core.tasting_snapshot import RatingEntry, RevealEntry


@dataclass(frozen=True)
class BeerStat:
    """Aggregate scores for one beer number across all players."""
    beer_number: int
    name: str | None
    avg_crush: float
    avg_taste: float
    combined: float
    rating_count: int
    scored_count: int

    @property
    def has_scores(self) -> bool:
        return self.scored_count > 0


def is_valid_score(value: object) -> bool:
    """True for an int in SCORE_MIN..SCORE_MAX (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return SCORE_MIN <= value <= SCORE_MAX


def is_scored(rating: RatingEntry) -> bool:
    """A rating counts toward averages only when both scores are valid."""
    return is_valid_score(rating.crushability) and is_valid_score(rating.taste)


def index_reveals(reveals: Iterable[RevealEntry]) -> dict[int, RevealEntry]:
    """Map beer number -> reveal, first one wins."""
    by_number: dict[int, RevealEntry] = {}
    for reveal in reveals:
        by_number.setdefault(reveal.beer_number, reveal)
    return by_number


def beer_display_name(beer_number: int, reveals_by_number: dict[int, RevealEntry]) -> str:
    """Revealed name, or the anonymous "Beer #N" label."""
    reveal = reveals_by_number.get(beer_number)
    return reveal.beer_name if reveal else f"Beer #{beer_number}"


def mean(values: list[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_beer_stats(
    beer_count: int,
    ratings: Iterable[RatingEntry],
    reveals: Iterable[RevealEntry],
) -> list[BeerStat]:
    """Compute one BeerStat per beer number 1..beer_count. Pure, no IO."""
    by_beer: dict[int, list[RatingEntry]] = {}
    for rating in ratings:
        by_beer.setdefault(rating.beer_number, []).append(rating)
    reveals_by_number = index_reveals(reveals)

    stats = []
    for number in range(1, beer_count + 1):
        for_beer = by_beer.get(number, [])
        scored = [r for r in for_beer if is_scored(r)]
        avg_crush = mean([r.crushability for r in scored])
        avg_taste = mean([r.taste for r in scored])
        reveal = reveals_by_number.get(number)
        stats.append(BeerStat(
            beer_number=number,
            name=reveal.beer_name if reveal else None,
            avg_crush=avg_crush,
            avg_taste=avg_taste,
            combined=(avg_crush + avg_taste) / 2,
            rating_count=len(for_beer),
            scored_count=len(scored),
        ))
    return stats


_RANK_FIELDS = {
    RankBy.COMBINED: "combined",
    RankBy.TASTE: "avg_taste",
    RankBy.CRUSH: "avg_crush",
}


def rank_beers(stats: Iterable[BeerStat], by: RankBy | str = RankBy.COMBINED) -> list[BeerStat]:
    """Sort beer stats descending on the chosen field.

    Raises ValueError for an unknown field name.
    """
    attr = _RANK_FIELDS[RankBy(by)]
    # sorted() with reverse=True keeps equal elements in input order
    return sorted(stats, key=lambda s: getattr(s, attr), reverse=True)
