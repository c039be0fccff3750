"""Session Summary — host dashboard built from one snapshot."""

from uuid import uuid4

from blindbeer.core.session_summary import summarize_session
from blindbeer.core.tasting_snapshot import (
    PlayerEntry, RatingEntry, RevealEntry, TastingSnapshot,
)


def _snapshot():
    alice = PlayerEntry(id=uuid4(), name="Alice")
    bob = PlayerEntry(id=uuid4(), name="Bob")
    return TastingSnapshot(
        beer_count=3,
        players=(alice, bob),
        ratings=(
            RatingEntry(alice.id, 1, crushability=8, taste=7, guess="Pale Ale"),
            RatingEntry(alice.id, 2, crushability=5, taste=9, guess="Porter"),
            RatingEntry(bob.id, 2, crushability=9, taste=9),
        ),
        reveals=(
            RevealEntry(1, "Pale Ale"),
            RevealEntry(2, "Stout"),
            RevealEntry(7, "Out of range"),
        ),
    )


def test_empty_session_summary():
    summary = summarize_session(TastingSnapshot(beer_count=0))
    assert summary.player_count == 0
    assert summary.beer_stats == []
    assert summary.guess_leaderboard == []


def test_counts():
    summary = summarize_session(_snapshot())
    assert summary.beer_count == 3
    assert summary.player_count == 2
    assert summary.rating_count == 3
    assert summary.revealed_count == 2


def test_rankings_and_leaderboard():
    summary = summarize_session(_snapshot())
    assert [s.beer_number for s in summary.overall_ranking] == [2, 1, 3]
    assert [s.beer_number for s in summary.crush_ranking] == [1, 2, 3]
    [row] = summary.guess_leaderboard
    assert (row.player_name, row.correct, row.total) == ("Alice", 1, 2)
    assert [p.ratings_submitted for p in summary.progress] == [2, 1]


def test_summary_is_idempotent():
    snapshot = _snapshot()
    assert summarize_session(snapshot) == summarize_session(snapshot)
