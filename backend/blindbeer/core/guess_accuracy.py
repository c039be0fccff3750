"""Guess Accuracy — exact, case-insensitive matching of guesses against reveals.

Invariants:
    - A guess counts only when non-empty after trimming
    - Correct iff a reveal exists and names match after strip().lower(); no partial credit
    - A non-empty guess with no reveal is incorrect, never "none"
    - Players without guesses are omitted from the leaderboard (no 0/0 rows)

Design Decisions:
    - Leaderboard ties broken by lower-cased name then id so output is deterministic
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from uuid import UUID

from blindbeer.core.beer_stats import index_reveals
from blindbeer.core.domain_types import GuessResult
from blindbeer.core.tasting_snapshot import PlayerEntry, RatingEntry, RevealEntry


@dataclass(frozen=True)
class GuessAccuracyRow:
    """One leaderboard row."""
    player_id: UUID
    player_name: str
    correct: int
    total: int

    @property
    def ratio(self) -> float:
        return self.correct / self.total if self.total else 0.0


def normalize_guess(guess: str | None) -> str:
    return (guess or "").strip()


def has_guess(rating: RatingEntry) -> bool:
    return normalize_guess(rating.guess) != ""


def classify_guess(guess: str | None, reveal: RevealEntry | None) -> GuessResult:
    """Grade one guess against the reveal for its beer number."""
    cleaned = normalize_guess(guess)
    if not cleaned:
        return GuessResult.NONE
    if reveal is None:
        return GuessResult.INCORRECT
    actual = reveal.beer_name.strip().lower()
    if actual and actual == cleaned.lower():
        return GuessResult.CORRECT
    return GuessResult.INCORRECT


def is_correct_guess(guess: str | None, reveal: RevealEntry | None) -> bool:
    return classify_guess(guess, reveal) is GuessResult.CORRECT


def count_guesses(
    ratings: Iterable[RatingEntry], reveals_by_number: dict[int, RevealEntry],
) -> tuple[int, int]:
    """Return (correct, total) over ratings carrying a non-empty guess."""
    correct = total = 0
    for rating in ratings:
        if not has_guess(rating):
            continue
        total += 1
        if is_correct_guess(rating.guess, reveals_by_number.get(rating.beer_number)):
            correct += 1
    return correct, total


def compute_guess_accuracy(
    players: Sequence[PlayerEntry],
    ratings: Iterable[RatingEntry],
    reveals: Iterable[RevealEntry],
) -> list[GuessAccuracyRow]:
    """Build the guess leaderboard, best ratio first. Pure, no IO."""
    reveals_by_number = index_reveals(reveals)
    by_player: dict[UUID, list[RatingEntry]] = {}
    for rating in ratings:
        by_player.setdefault(rating.player_id, []).append(rating)

    rows = []
    for player in players:
        correct, total = count_guesses(by_player.get(player.id, []), reveals_by_number)
        if total == 0:
            continue
        rows.append(GuessAccuracyRow(
            player_id=player.id, player_name=player.name,
            correct=correct, total=total,
        ))
    rows.sort(key=lambda r: (-r.ratio, r.player_name.lower(), str(r.player_id)))
    return rows
