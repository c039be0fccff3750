"""Guess Accuracy — exact, case-insensitive guess matching and the leaderboard.

Tests:
    - Match ignores surrounding whitespace and case, nothing else
    - A guess with no reveal is incorrect; an empty guess is not a guess
    - Players with no guesses never appear on the leaderboard
"""

from uuid import uuid4

from blindbeer.core.domain_types import GuessResult
from blindbeer.core.guess_accuracy import (
    classify_guess, compute_guess_accuracy, count_guesses, has_guess,
)
from blindbeer.core.tasting_snapshot import PlayerEntry, RatingEntry, RevealEntry

IPA = RevealEntry(beer_number=1, beer_name="IPA")


def _player(name):
    return PlayerEntry(id=uuid4(), name=name)


def _guess(player, beer, guess):
    return RatingEntry(player_id=player.id, beer_number=beer, guess=guess)


def test_guess_matches_ignoring_case_and_whitespace():
    assert classify_guess(" ipa ", IPA) is GuessResult.CORRECT


def test_partial_name_is_incorrect():
    reveal = RevealEntry(beer_number=1, beer_name="Hazy IPA")
    assert classify_guess("IPA", reveal) is GuessResult.INCORRECT


def test_guess_without_reveal_is_incorrect():
    assert classify_guess("Stout", None) is GuessResult.INCORRECT


def test_blank_guess_is_none():
    assert classify_guess("   ", IPA) is GuessResult.NONE
    assert classify_guess(None, IPA) is GuessResult.NONE


def test_has_guess_ignores_whitespace():
    alice = _player("Alice")
    assert has_guess(_guess(alice, 1, "Lager"))
    assert not has_guess(_guess(alice, 1, "  "))


def test_count_guesses_counts_only_non_empty():
    alice = _player("Alice")
    ratings = [
        _guess(alice, 1, "ipa"),
        _guess(alice, 2, "Stout"),
        _guess(alice, 3, ""),
    ]
    assert count_guesses(ratings, {1: IPA}) == (1, 2)


def test_leaderboard_two_of_three():
    alice = _player("Alice")
    reveals = [
        IPA,
        RevealEntry(beer_number=2, beer_name="Stout"),
        RevealEntry(beer_number=3, beer_name="Pilsner"),
    ]
    ratings = [
        _guess(alice, 1, "IPA"),
        _guess(alice, 2, "stout"),
        _guess(alice, 3, "Lager"),
    ]
    [row] = compute_guess_accuracy([alice], ratings, reveals)
    assert (row.correct, row.total) == (2, 3)
    assert abs(row.ratio - 2 / 3) < 1e-9


def test_players_without_guesses_are_omitted():
    alice, bob = _player("Alice"), _player("Bob")
    ratings = [
        _guess(alice, 1, "IPA"),
        RatingEntry(player_id=bob.id, beer_number=1, crushability=5, taste=5),
    ]
    rows = compute_guess_accuracy([alice, bob], ratings, [IPA])
    assert [r.player_name for r in rows] == ["Alice"]


def test_player_with_all_wrong_guesses_has_zero_ratio():
    carol = _player("Carol")
    [row] = compute_guess_accuracy([carol], [_guess(carol, 1, "Porter")], [IPA])
    assert row.correct == 0
    assert row.ratio == 0.0


def test_leaderboard_sorted_by_ratio_then_name():
    zed, amy, bea = _player("zed"), _player("Amy"), _player("bea")
    reveals = [IPA, RevealEntry(beer_number=2, beer_name="Stout")]
    ratings = [
        _guess(zed, 1, "IPA"), _guess(zed, 2, "Stout"),
        _guess(amy, 1, "IPA"), _guess(amy, 2, "Lager"),
        _guess(bea, 1, "IPA"), _guess(bea, 2, "Porter"),
    ]
    rows = compute_guess_accuracy([zed, amy, bea], ratings, reveals)
    assert [r.player_name for r in rows] == ["zed", "Amy", "bea"]


def test_ratings_of_unknown_players_are_ignored():
    alice = _player("Alice")
    stranger = RatingEntry(player_id=uuid4(), beer_number=1, guess="IPA")
    assert compute_guess_accuracy([alice], [stranger], [IPA]) == []
