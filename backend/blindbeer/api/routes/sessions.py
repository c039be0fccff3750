"""Session Routes — create a tasting, public lookup, host updates and admin login.

Invariants:
    - The creator is signed in as admin immediately (token in body and cookie)
    - Public responses never include the password hash
    - Admin cookie is HttpOnly, SameSite=Lax, scoped to "/"
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.api.deps import get_tasting_session, require_admin
from blindbeer.config import get_settings
from blindbeer.core.session_rules import normalize_session_code
from blindbeer.infrastructure.database import get_db
from blindbeer.infrastructure.security import create_admin_token
from blindbeer.models.session import TastingSession
from blindbeer.schemas.session import (
    AdminLogin, AdminToken, SessionCreate, SessionCreatedResponse,
    SessionResponse, SessionUpdate,
)
from blindbeer.services.handle_sessions import SessionHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


def _set_admin_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        settings.admin_cookie_name, token,
        max_age=settings.admin_token_ttl_minutes * 60,
        httponly=True, samesite="lax",
        secure=settings.admin_cookie_secure, path="/",
    )


@router.post(
    "", response_model=SessionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate, response: Response, db: AsyncSession = Depends(get_db),
):
    """Create a tasting and sign the host in."""
    session = await SessionHandlers(db).create_session(body)
    token = create_admin_token(session.code)
    _set_admin_cookie(response, token)
    return SessionCreatedResponse(
        code=session.code,
        name=session.name,
        beer_count=session.beer_count,
        is_active=session.is_active,
        created_at=session.created_at,
        access_token=token,
    )


@router.get("/{code}", response_model=SessionResponse)
async def get_session(session: TastingSession = Depends(get_tasting_session)):
    return SessionResponse.model_validate(session)


@router.patch(
    "/{code}", response_model=SessionResponse,
    dependencies=[Depends(require_admin)],
)
async def update_session(
    body: SessionUpdate,
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    """Rename the tasting or open/close it for new players."""
    session = await SessionHandlers(db).update_session(session, body)
    return SessionResponse.model_validate(session)


@router.post("/{code}/admin/login", response_model=AdminToken)
async def admin_login(
    code: str, body: AdminLogin, response: Response,
    db: AsyncSession = Depends(get_db),
):
    token = await SessionHandlers(db).authenticate_admin(code, body.password)
    _set_admin_cookie(response, token)
    logger.info(
        "Admin signed in", extra={"session_code": normalize_session_code(code)},
    )
    return AdminToken(access_token=token)


@router.post("/{code}/admin/logout", status_code=status.HTTP_204_NO_CONTENT)
async def admin_logout(code: str, response: Response):
    response.delete_cookie(get_settings().admin_cookie_name, path="/")
    logger.info(
        "Admin signed out", extra={"session_code": normalize_session_code(code)},
    )
