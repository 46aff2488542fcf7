"""SQLAlchemy implementation of UserRoleRepository."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import UserRoleRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    UserRoleModel,
)

logger = logging.getLogger(__name__)


class UserRoleRepositorySQLAlchemy(UserRoleRepository):
    """SQLAlchemy implementation of the UserRoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, user_id: str, role_name: str) -> None:
        self._session.add(UserRoleModel(user_id=user_id, role_name=role_name))
        await self._session.flush()
        logger.debug("Added role %s for user: %s", role_name, user_id)

    async def delete(self, user_id: str, role_name: str) -> None:
        stmt = delete(UserRoleModel).where(
            UserRoleModel.user_id == user_id,
            func.lower(UserRoleModel.role_name) == role_name.lower(),
        )
        await self._session.execute(stmt)
        await self._session.flush()
        logger.debug("Removed role %s for user: %s", role_name, user_id)

    async def list_by_user(self, user_id: str) -> list[str]:
        stmt = (
            select(UserRoleModel.role_name)
            .where(UserRoleModel.user_id == user_id)
            .order_by(UserRoleModel.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(UserRoleModel).where(UserRoleModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        if result.rowcount:
            logger.info("Deleted %d role(s) for user: %s", result.rowcount, user_id)
        return result.rowcount
