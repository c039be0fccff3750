"""Rating and reveal schemas — write-path validation before anything reaches the engine.

Invariants:
    - Scores outside 1..10 are rejected at the edge
    - Blank guesses and notes are stored as null
"""

import pytest
from pydantic import ValidationError

from blindbeer.schemas.rating import RatingSubmit
from blindbeer.schemas.reveal import RevealUpsert


def test_rating_accepts_bounds():
    body = RatingSubmit(crushability=1, taste=10)
    assert (body.crushability, body.taste) == (1, 10)


@pytest.mark.parametrize("field,value", [
    ("crushability", 0), ("crushability", 11), ("taste", -3), ("taste", 42),
])
def test_rating_rejects_out_of_range_scores(field, value):
    with pytest.raises(ValidationError):
        RatingSubmit(**{field: value})


def test_rating_all_fields_optional():
    body = RatingSubmit()
    assert body.crushability is None
    assert body.guess is None


def test_blank_guess_and_notes_become_none():
    body = RatingSubmit(guess="   ", notes="")
    assert body.guess is None
    assert body.notes is None


def test_guess_is_stripped():
    assert RatingSubmit(guess="  Hazy IPA ").guess == "Hazy IPA"


def test_reveal_requires_beer_name():
    with pytest.raises(ValidationError):
        RevealUpsert(beer_name="   ")


def test_reveal_optional_fields_blank_to_none():
    body = RevealUpsert(beer_name=" Stout ", brewery=" ", style="Imperial")
    assert body.beer_name == "Stout"
    assert body.brewery is None
    assert body.style == "Imperial"


@pytest.mark.parametrize("field", ["crushability", "taste"])
@pytest.mark.parametrize("value", [True, False, "7", 7.0])
def test_rating_scores_are_not_coerced(field, value):
    with pytest.raises(ValidationError):
        RatingSubmit(**{field: value})
