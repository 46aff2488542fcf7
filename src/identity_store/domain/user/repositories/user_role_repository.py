"""User role membership repository interface."""

from abc import ABC, abstractmethod


class UserRoleRepository(ABC):
    """Repository interface for (user_id, role_name) membership rows."""

    @abstractmethod
    async def insert(self, user_id: str, role_name: str) -> None:
        """Persist a role membership."""

    @abstractmethod
    async def delete(self, user_id: str, role_name: str) -> None:
        """Delete the membership; role names match case-insensitively."""

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[str]:
        """List a user's role names in insertion order."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> int:
        """Delete all memberships of a user and return how many were removed."""
