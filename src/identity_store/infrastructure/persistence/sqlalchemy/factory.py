"""Wiring of the SQLAlchemy record stores into an IdentityStore."""

from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.application.services import IdentityStore
from identity_store.infrastructure.persistence.sqlalchemy.repositories import (
    UserClaimRepositorySQLAlchemy,
    UserLoginRepositorySQLAlchemy,
    UserRecordRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)


def create_identity_store(session: AsyncSession) -> IdentityStore:
    """Build an IdentityStore whose record stores all share ``session``.

    The caller owns the session: repositories only flush, so committing
    (or wrapping several calls in ``session.begin()``) is up to the caller.
    """
    return IdentityStore(
        user_repository=UserRecordRepositorySQLAlchemy(session),
        login_repository=UserLoginRepositorySQLAlchemy(session),
        claim_repository=UserClaimRepositorySQLAlchemy(session),
        role_repository=UserRoleRepositorySQLAlchemy(session),
    )
