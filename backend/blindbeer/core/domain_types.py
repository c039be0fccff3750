"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SessionId, PlayerId, RatingId wrap UUIDs
    - Scores are integers bounded SCORE_MIN..SCORE_MAX
    - Beer numbers are bounded 1..beer_count, beer_count bounded 1..MAX_BEER_COUNT
    - All valid states encoded as Enums, never raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", UUID)
PlayerId = NewType("PlayerId", UUID)
RatingId = NewType("RatingId", UUID)


# ─── Bounds ──────────────────────────────────────────────────────

SCORE_MIN = 1
SCORE_MAX = 10
MAX_BEER_COUNT = 99
DEFAULT_BEER_COUNT = 13
DEFAULT_SESSION_NAME = "Blind Tasting"
ADMIN_PASSWORD_MAX_BYTES = 72  # bcrypt input limit


# ─── Enums ───────────────────────────────────────────────────────

class OrderDirection(str, Enum):
    """Order in which a player works through the beer slots."""
    ASCENDING = "ascending"
    DESCENDING = "descending"


class RankBy(str, Enum):
    """Field a beer ranking is sorted on."""
    COMBINED = "combined"
    TASTE = "taste"
    CRUSH = "crush"


class GuessResult(str, Enum):
    """Outcome of one guess against the revealed beer name."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NONE = "none"
