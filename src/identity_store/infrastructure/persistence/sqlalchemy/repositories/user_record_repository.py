"""SQLAlchemy implementation of UserRecordRepository."""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import User, UserRecordRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRecordRepositorySQLAlchemy(UserRecordRepository):
    """SQLAlchemy implementation of the UserRecordRepository interface.

    Unique violations on user_name or email surface as
    ``sqlalchemy.exc.IntegrityError`` from ``insert``/``update``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, user: User) -> None:
        model = self._map_to_model(user)
        self._session.add(model)
        await self._session.flush()
        logger.info("Created user: %s (user_name: %s)", user.id, user.user_name)

    async def update(self, user: User) -> None:
        model = await self._find_model_by_id(user.id)
        if model is None:
            logger.warning("Update skipped, user row not found: %s", user.id)
            return

        self._update_model(model, user)
        await self._session.flush()
        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: str) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def find_by_id(self, user_id: str) -> User | None:
        model = await self._find_model_by_id(user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_name(self, user_name: str) -> User | None:
        stmt = select(UserModel).where(UserModel.user_name == user_name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def list_all(self) -> list[User]:
        return await self.query()

    async def query(self, *criteria: Any) -> list[User]:
        stmt = (
            select(UserModel)
            .where(*criteria)
            .order_by(UserModel.created_at, UserModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            user_name=model.user_name,
            email=model.email,
            email_confirmed=model.email_confirmed,
            password_hash=model.password_hash,
            security_stamp=model.security_stamp,
            phone_number=model.phone_number,
            phone_number_confirmed=model.phone_number_confirmed,
            two_factor_enabled=model.two_factor_enabled,
            lockout_end_utc=model.lockout_end_utc,
            lockout_enabled=model.lockout_enabled,
            access_failed_count=model.access_failed_count,
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(id=user.id)
        self._update_model(model, user)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        model.user_name = user.user_name
        model.email = user.email or None
        model.email_confirmed = user.email_confirmed
        model.password_hash = user.password_hash
        model.security_stamp = user.security_stamp
        model.phone_number = user.phone_number
        model.phone_number_confirmed = user.phone_number_confirmed
        model.two_factor_enabled = user.two_factor_enabled
        model.lockout_end_utc = user.lockout_end_utc
        model.lockout_enabled = user.lockout_enabled
        model.access_failed_count = user.access_failed_count
