"""
Pytest configuration for identity_store persistence tests.

Persistence tests run against an in-memory SQLite database.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import db_session, sqlite_engine

__all__ = [
    "db_session",
    "sqlite_engine",
]
