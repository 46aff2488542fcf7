# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for the identity record stores."""

from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_claim_repository import (
    UserClaimRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_login_repository import (
    UserLoginRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_record_repository import (
    UserRecordRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_role_repository import (
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "UserClaimRepositorySQLAlchemy",
    "UserLoginRepositorySQLAlchemy",
    "UserRecordRepositorySQLAlchemy",
    "UserRoleRepositorySQLAlchemy",
]
