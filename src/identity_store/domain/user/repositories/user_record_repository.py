"""User record repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from identity_store.domain.user.aggregates.user import User


class UserRecordRepository(ABC):
    """Repository interface for persisted user rows (scalar fields only)."""

    @abstractmethod
    async def insert(self, user: User) -> None:
        """Insert a new user row."""

    @abstractmethod
    async def update(self, user: User) -> None:
        """Write the user's scalar fields to its existing row."""

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete a user row by ID. Missing rows are ignored."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_name(self, user_name: str) -> Optional[User]:
        """Find a user by their user name."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users."""

    @abstractmethod
    async def query(self, *criteria: Any) -> list[User]:
        """List users matching all given predicates."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
