"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or a real identity provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret-key")
os.environ.setdefault("AUTH_ALGORITHM", "HS256")
os.environ.setdefault("LOG_FORMAT", "text")
