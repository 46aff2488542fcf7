"""SQLAlchemy model for external logins."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
)


class UserLoginModel(IdentityBase):
    """
    SQLAlchemy model for a (user_id, login_provider, provider_key) triple.

    user_id has no FK to users so that deleting a user row never depends
    on its logins being removed first.

    Table: user_logins
    """

    __tablename__ = "user_logins"
    __table_args__ = (
        UniqueConstraint(
            "login_provider",
            "provider_key",
            "user_id",
            name="uq_user_logins_provider_key_user",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    login_provider: Mapped[str] = mapped_column(String(128), nullable=False)
    provider_key: Mapped[str] = mapped_column(String(256), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UserLoginModel(user_id={self.user_id}, "
            f"login_provider={self.login_provider})>"
        )
