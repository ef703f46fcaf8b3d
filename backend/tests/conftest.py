"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach a real MySQL server
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
