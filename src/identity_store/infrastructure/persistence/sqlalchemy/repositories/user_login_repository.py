"""SQLAlchemy implementation of UserLoginRepository."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import UserLoginInfo, UserLoginRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    UserLoginModel,
)

logger = logging.getLogger(__name__)


class UserLoginRepositorySQLAlchemy(UserLoginRepository):
    """
    SQLAlchemy implementation of UserLoginRepository.

    Rows are matched on exact provider name and provider key.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    async def insert(self, user_id: str, login: UserLoginInfo) -> None:
        model = UserLoginModel(
            user_id=user_id,
            login_provider=login.login_provider,
            provider_key=login.provider_key,
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug(
            "Added login %s for user: %s", login.login_provider, user_id
        )

    async def delete(self, user_id: str, login: UserLoginInfo) -> None:
        stmt = delete(UserLoginModel).where(
            UserLoginModel.user_id == user_id,
            UserLoginModel.login_provider == login.login_provider,
            UserLoginModel.provider_key == login.provider_key,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        logger.debug(
            "Removed %d login row(s) %s for user: %s",
            result.rowcount,
            login.login_provider,
            user_id,
        )

    async def list_by_user(self, user_id: str) -> list[UserLoginInfo]:
        stmt = (
            select(UserLoginModel)
            .where(UserLoginModel.user_id == user_id)
            .order_by(UserLoginModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            UserLoginInfo(
                login_provider=model.login_provider,
                provider_key=model.provider_key,
            )
            for model in result.scalars().all()
        ]

    async def find_user_id_by_login(
        self,
        login_provider: str,
        provider_key: str,
    ) -> str | None:
        stmt = (
            select(UserLoginModel.user_id)
            .where(
                UserLoginModel.login_provider == login_provider,
                UserLoginModel.provider_key == provider_key,
            )
            .order_by(UserLoginModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(UserLoginModel).where(UserLoginModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        if result.rowcount:
            logger.info("Deleted %d login(s) for user: %s", result.rowcount, user_id)
        return result.rowcount
