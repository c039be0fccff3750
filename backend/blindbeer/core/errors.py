"""Error Hierarchy — typed failures of the tasting write path and shell.

Invariants:
    - Every error carries a stable code, a category, a severity and an HTTP status
    - 4xx errors are the caller's to fix; 5xx errors are ours and logged as errors
    - to_response() is the only shape a client ever sees
    - Messages are safe to show to players: no SQL, no hashes, no tokens

Design Decisions:
    - One base class (BlindBeerError) so a single FastAPI handler covers all of them
    - ErrorContext is a mutable dataclass: lower layers raise, upper layers fill in
      session_code / player_id as they learn them
    - The aggregation engine raises none of these; it returns zeros and empties
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where in the tasting the failure happened."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_code: str | None = None
    player_id: str | None = None
    beer_number: int | None = None
    debug_info: dict[str, Any] | None = None


class BlindBeerError(Exception):
    """Base for every error the API turns into a structured response."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def log_extra(self) -> dict:
        """Fields for logger.*(extra=...), matching observability.LOG_FIELDS."""
        return {
            "error_code": self.code,
            "session_code": self.context.session_code,
            "player_id": self.context.player_id,
            "beer_number": self.context.beer_number,
        }

    def to_response(self) -> dict:
        ctx = self.context
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": ctx.timestamp.isoformat(),
                "context": {
                    "session_code": ctx.session_code,
                    "player_id": ctx.player_id,
                    "beer_number": ctx.beer_number,
                },
            }
        }


# ─── Client errors (4xx) ────────────────────────────────────────

class RatingValidationError(BlindBeerError):
    """A rating or reveal was rejected before any write."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class BeerNumberOutOfRangeError(RatingValidationError):
    def __init__(
        self, beer_number: int, beer_count: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.beer_number = beer_number
        super().__init__(
            f"Beer number {beer_number} is outside 1..{beer_count}",
            "beer_number", ctx,
        )
        self.beer_count = beer_count


class ResourceNotFoundError(BlindBeerError):
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type


class SessionInactiveError(BlindBeerError):
    """The host closed the session to new players."""
    def __init__(self, code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.session_code = code
        super().__init__(
            "This session is no longer active.",
            "SESSION_INACTIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 409,
        )


class SessionCodeExhaustedError(BlindBeerError):
    """Every generated join code collided with an existing session."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not generate a unique session code after {attempts} attempts. Try again.",
            "SESSION_CODE_EXHAUSTED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.attempts = attempts


class AdminAuthError(BlindBeerError):
    """Missing, invalid, expired or foreign admin credentials."""
    def __init__(
        self,
        message: str = "Admin authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "ADMIN_AUTH_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Server errors (5xx) ────────────────────────────────────────

class DatabaseError(BlindBeerError):
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
