"""Session Schemas — session creation, public view, host updates and admin login.

Invariants:
    - beer_count: 1..99
    - Blank names fall back to the default session name
    - Responses never carry the admin password or its hash
    - Admin passwords fit bcrypt's 72-byte input (UTF-8 bytes, not characters)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blindbeer.core.domain_types import (
    ADMIN_PASSWORD_MAX_BYTES, DEFAULT_BEER_COUNT, DEFAULT_SESSION_NAME, MAX_BEER_COUNT,
)


def check_password_bytes(v: str) -> str:
    if len(v.encode("utf-8")) > ADMIN_PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {ADMIN_PASSWORD_MAX_BYTES} bytes")
    return v


class SessionCreate(BaseModel):
    """Session creation — the admin password protects reveals and results."""
    name: str = Field(DEFAULT_SESSION_NAME, max_length=120)
    beer_count: int = Field(DEFAULT_BEER_COUNT, ge=1, le=MAX_BEER_COUNT)
    admin_password: str = Field(min_length=4, max_length=72)

    @field_validator("name")
    @classmethod
    def default_blank_name(cls, v: str) -> str:
        return v.strip() or DEFAULT_SESSION_NAME

    @field_validator("admin_password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_bytes(v)


class SessionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class SessionResponse(BaseModel):
    """Public session data."""
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    beer_count: int
    is_active: bool
    created_at: datetime


class SessionCreatedResponse(SessionResponse):
    access_token: str
    token_type: str = "bearer"


class AdminLogin(BaseModel):
    password: str = Field(max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_bytes(v)


class AdminToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
