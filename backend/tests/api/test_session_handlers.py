"""SessionHandlers.create_session — only code collisions are retried."""

import pytest
from sqlalchemy.exc import IntegrityError

from blindbeer.schemas.session import SessionCreate
from blindbeer.services.handle_sessions import SessionHandlers


async def test_other_integrity_errors_are_not_retried(test_db, monkeypatch):
    calls = []

    def fake_code(length, rng=None):
        calls.append(length)
        return f"CODE{len(calls):02d}"

    monkeypatch.setattr(
        "blindbeer.services.handle_sessions.generate_session_code", fake_code,
    )
    # bypasses schema bounds so the beer_count CHECK constraint fails on commit
    body = SessionCreate.model_construct(
        name="Broken", beer_count=500, admin_password="secret",
    )
    with pytest.raises(IntegrityError):
        await SessionHandlers(test_db).create_session(body)
    assert len(calls) == 1


async def test_collision_retries_with_fresh_code(test_db, monkeypatch):
    codes = iter(["DUPDUP", "DUPDUP", "FRESH2"])
    monkeypatch.setattr(
        "blindbeer.services.handle_sessions.generate_session_code",
        lambda length, rng=None: next(codes),
    )
    handlers = SessionHandlers(test_db)
    body = SessionCreate(admin_password="secret")
    first = (await handlers.create_session(body)).code
    second = (await handlers.create_session(body)).code
    assert (first, second) == ("DUPDUP", "FRESH2")
