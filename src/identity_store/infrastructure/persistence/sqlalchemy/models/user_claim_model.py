"""SQLAlchemy model for user claims."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
)


class UserClaimModel(IdentityBase):
    """SQLAlchemy model for a (user_id, claim_type, claim_value) triple."""

    __tablename__ = "user_claims"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "claim_type",
            "claim_value",
            name="uq_user_claims_user_type_value",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    claim_type: Mapped[str] = mapped_column(String(256), nullable=False)
    claim_value: Mapped[str] = mapped_column(String(1024), nullable=False)

    def __repr__(self) -> str:
        return f"<UserClaimModel(user_id={self.user_id}, claim_type={self.claim_type})>"
