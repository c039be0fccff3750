"""Session Summary — pure computation of the host dashboard from a TastingSnapshot.

Invariants:
    - All inputs come from the snapshot (no IO, no DB)
    - Never raises on a well-typed snapshot; an empty session yields zero counts

Design Decisions:
    - Pure function, not a method on TastingSnapshot: the snapshot is data, the
      summary is presentation
"""

from dataclasses import dataclass, field

from blindbeer.core.beer_stats import BeerStat, compute_beer_stats, index_reveals, rank_beers
from blindbeer.core.domain_types import RankBy
from blindbeer.core.guess_accuracy import GuessAccuracyRow, compute_guess_accuracy
from blindbeer.core.session_rules import PlayerProgress, compute_player_progress
from blindbeer.core.tasting_snapshot import TastingSnapshot


@dataclass(frozen=True)
class SessionSummary:
    beer_count: int
    player_count: int
    rating_count: int
    revealed_count: int
    beer_stats: list[BeerStat] = field(default_factory=list)
    overall_ranking: list[BeerStat] = field(default_factory=list)
    taste_ranking: list[BeerStat] = field(default_factory=list)
    crush_ranking: list[BeerStat] = field(default_factory=list)
    guess_leaderboard: list[GuessAccuracyRow] = field(default_factory=list)
    progress: list[PlayerProgress] = field(default_factory=list)


def summarize_session(snapshot: TastingSnapshot) -> SessionSummary:
    """Compute the full host dashboard. Pure, no IO."""
    stats = compute_beer_stats(snapshot.beer_count, snapshot.ratings, snapshot.reveals)
    revealed = [
        n for n in index_reveals(snapshot.reveals)
        if 1 <= n <= snapshot.beer_count
    ]
    return SessionSummary(
        beer_count=snapshot.beer_count,
        player_count=len(snapshot.players),
        rating_count=len(snapshot.ratings),
        revealed_count=len(revealed),
        beer_stats=stats,
        overall_ranking=rank_beers(stats, RankBy.COMBINED),
        taste_ranking=rank_beers(stats, RankBy.TASTE),
        crush_ranking=rank_beers(stats, RankBy.CRUSH),
        guess_leaderboard=compute_guess_accuracy(
            snapshot.players, snapshot.ratings, snapshot.reveals,
        ),
        progress=compute_player_progress(
            snapshot.beer_count, snapshot.players, snapshot.ratings,
        ),
    )
