"""Admin Security — bcrypt password hashing and signed, expiring admin tokens.

Invariants:
    - Admin passwords are never stored or compared in plaintext
    - A token is bound to exactly one session code (sub claim) and expires
    - decode_admin_token never raises: invalid/expired/tampered -> None

Design Decisions:
    - bcrypt directly (no passlib); input longer than bcrypt's 72 bytes is refused,
      never truncated, so no suffix of a password is silently ignored
    - JWT via python-jose, HS256, secret injected from settings (no fallback)
"""

from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from blindbeer.config import get_settings
from blindbeer.core.domain_types import ADMIN_PASSWORD_MAX_BYTES


def hash_password(plain: str) -> str:
    """Hash a plain password for storing in DB.

    Raises ValueError above ADMIN_PASSWORD_MAX_BYTES (schemas reject it first).
    """
    pw_bytes = plain.encode("utf-8")
    if len(pw_bytes) > ADMIN_PASSWORD_MAX_BYTES:
        raise ValueError(f"password exceeds {ADMIN_PASSWORD_MAX_BYTES} bytes")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt()).decode("ascii")


def verify_password(plain: str, hashed: str) -> bool:
    pw_bytes = plain.encode("utf-8")
    if len(pw_bytes) > ADMIN_PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("ascii"))
    except ValueError:
        # malformed stored hash
        return False


def create_admin_token(session_code: str, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.admin_token_ttl_minutes)
    )
    payload = {"sub": session_code, "scope": "admin", "exp": expire}
    return jwt.encode(
        payload, settings.admin_token_secret, algorithm=settings.admin_token_algorithm,
    )


def decode_admin_token(token: str) -> str | None:
    """Return the session code the token grants, or None if invalid/expired."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.admin_token_secret,
            algorithms=[settings.admin_token_algorithm],
        )
    except JWTError:
        return None
    if payload.get("scope") != "admin":
        return None
    return payload.get("sub")
