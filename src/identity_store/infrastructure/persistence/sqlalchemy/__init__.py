"""SQLAlchemy implementation for identity_store persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel, UserLoginModel, UserClaimModel, UserRoleModel: table models
- *RepositorySQLAlchemy: record store implementations
- create_identity_store: IdentityStore wired to one AsyncSession
- create_engine_from_settings / create_session_factory: engine and sessions
- create_tables / drop_tables: schema helpers
"""

from identity_store.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_settings,
    create_session_factory,
)
from identity_store.infrastructure.persistence.sqlalchemy.factory import (
    create_identity_store,
)
from identity_store.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    IdentityBase,
    UserClaimModel,
    UserLoginModel,
    UserModel,
    UserRoleModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories import (
    UserClaimRepositorySQLAlchemy,
    UserLoginRepositorySQLAlchemy,
    UserRecordRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserClaimModel",
    "UserClaimRepositorySQLAlchemy",
    "UserLoginModel",
    "UserLoginRepositorySQLAlchemy",
    "UserModel",
    "UserRecordRepositorySQLAlchemy",
    "UserRoleModel",
    "UserRoleRepositorySQLAlchemy",
    "create_engine_from_settings",
    "create_identity_store",
    "create_session_factory",
    "create_tables",
    "drop_tables",
]
