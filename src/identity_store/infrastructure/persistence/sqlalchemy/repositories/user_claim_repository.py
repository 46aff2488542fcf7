"""SQLAlchemy implementation of UserClaimRepository."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import Claim, UserClaimRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    UserClaimModel,
)

logger = logging.getLogger(__name__)


class UserClaimRepositorySQLAlchemy(UserClaimRepository):
    """SQLAlchemy implementation of the UserClaimRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, user_id: str, claim: Claim) -> None:
        self._session.add(
            UserClaimModel(
                user_id=user_id,
                claim_type=claim.claim_type,
                claim_value=claim.claim_value,
            )
        )
        await self._session.flush()
        logger.debug("Added claim %s for user: %s", claim.claim_type, user_id)

    async def delete(self, user_id: str, claim: Claim) -> None:
        stmt = delete(UserClaimModel).where(
            UserClaimModel.user_id == user_id,
            UserClaimModel.claim_type == claim.claim_type,
            UserClaimModel.claim_value == claim.claim_value,
        )
        await self._session.execute(stmt)
        await self._session.flush()
        logger.debug("Removed claim %s for user: %s", claim.claim_type, user_id)

    async def list_by_user(self, user_id: str) -> list[Claim]:
        stmt = (
            select(UserClaimModel)
            .where(UserClaimModel.user_id == user_id)
            .order_by(UserClaimModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            Claim(claim_type=model.claim_type, claim_value=model.claim_value)
            for model in result.scalars().all()
        ]

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(UserClaimModel).where(UserClaimModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        if result.rowcount:
            logger.info("Deleted %d claim(s) for user: %s", result.rowcount, user_id)
        return result.rowcount
