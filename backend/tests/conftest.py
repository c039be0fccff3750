"""Root conftest — shared test configuration."""

import os

# Settings refuse to load without a signing secret
os.environ.setdefault("ADMIN_TOKEN_SECRET", "test-secret-not-for-production")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
