"""SQLAlchemy model for role memberships."""

from sqlalchemy import Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
)


class UserRoleModel(IdentityBase):
    """SQLAlchemy model for a (user_id, role_name) membership."""

    __tablename__ = "user_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    role_name: Mapped[str] = mapped_column(String(256), nullable=False)

    def __repr__(self) -> str:
        return f"<UserRoleModel(user_id={self.user_id}, role_name={self.role_name})>"


# Role names are case-insensitive, so one membership per lower(role_name)
Index(
    "uq_user_roles_user_role_ci",
    UserRoleModel.user_id,
    func.lower(UserRoleModel.role_name),
    unique=True,
)
