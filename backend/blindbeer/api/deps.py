"""Shared dependencies: session lookup by code and admin guard."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.config import get_settings
from blindbeer.core.errors import AdminAuthError, ErrorContext
from blindbeer.core.session_rules import normalize_session_code
from blindbeer.infrastructure.database import get_db
from blindbeer.infrastructure.security import decode_admin_token
from blindbeer.models.session import TastingSession
from blindbeer.services.handle_sessions import SessionHandlers

bearer = HTTPBearer(auto_error=False)


async def get_tasting_session(
    code: str, db: AsyncSession = Depends(get_db),
) -> TastingSession:
    """Resolve the {code} path parameter or raise 404."""
    return await SessionHandlers(db).get_by_code(code)


async def require_admin(
    code: str,
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> str:
    """Accept an admin token from the Bearer header or the admin cookie.

    The token must have been issued for the session in the path.
    """
    settings = get_settings()
    normalized = normalize_session_code(code)
    ctx = ErrorContext(session_code=normalized)
    token = (
        credentials.credentials if credentials
        else request.cookies.get(settings.admin_cookie_name)
    )
    if not token:
        raise AdminAuthError(context=ctx)
    granted = decode_admin_token(token)
    if granted is None:
        raise AdminAuthError("Invalid or expired admin token", ctx)
    if granted != normalized:
        raise AdminAuthError("Admin token was issued for a different session", ctx)
    return granted
