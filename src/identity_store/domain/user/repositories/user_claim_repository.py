"""User claim repository interface."""

from abc import ABC, abstractmethod

from identity_store.domain.user.value_objects import Claim


class UserClaimRepository(ABC):
    """Repository interface for (user_id, claim_type, claim_value) rows."""

    @abstractmethod
    async def insert(self, user_id: str, claim: Claim) -> None:
        """Persist a claim for a user."""

    @abstractmethod
    async def delete(self, user_id: str, claim: Claim) -> None:
        """Delete every row matching the user, type and value (no-op if none)."""

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[Claim]:
        """List a user's claims in insertion order."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> int:
        """Delete all claims of a user and return how many were removed."""
