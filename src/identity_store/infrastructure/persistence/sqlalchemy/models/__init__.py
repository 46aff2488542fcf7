# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity persistence."""

from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
    TimestampMixin,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_claim_model import (
    UserClaimModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_login_model import (
    UserLoginModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_role_model import (
    UserRoleModel,
)

__all__ = [
    "IdentityBase",
    "TimestampMixin",
    "UserClaimModel",
    "UserLoginModel",
    "UserModel",
    "UserRoleModel",
]
