"""SQLAlchemy model for the User aggregate's scalar fields."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
    TimestampMixin,
)


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting user accounts.

    Logins, claims and roles live in their own tables, keyed by user_id.
    An empty email is stored as NULL so that the unique constraint only
    applies to real addresses.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_name: Mapped[str] = mapped_column(
        String(256),
        unique=True,
        nullable=False,
        index=True,
    )
    email: Mapped[str | None] = mapped_column(
        String(256),
        unique=True,
        nullable=True,
        index=True,
    )
    email_confirmed: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # Opaque credential strings, never interpreted here
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    security_stamp: Mapped[str | None] = mapped_column(Text, nullable=True)

    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    phone_number_confirmed: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    two_factor_enabled: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # Naive UTC
    lockout_end_utc: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=False),
        nullable=True,
    )
    lockout_enabled: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    access_failed_count: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, user_name={self.user_name})>"
