"""Abstract repository interface for external logins.

Each row is a (user_id, login_provider, provider_key) triple.
"""

from abc import ABC, abstractmethod

from identity_store.domain.user.value_objects import UserLoginInfo


class UserLoginRepository(ABC):
    """
    Abstract repository interface for a user's external logins.

    Implementations must provide methods for:
    - Inserting and deleting single logins
    - Listing the logins of one user in insertion order
    - Resolving a login back to the owning user id
    """

    @abstractmethod
    async def insert(self, user_id: str, login: UserLoginInfo) -> None:
        """
        Persist a login for a user.

        Parameters
        ----------
        user_id
            The owning user's identifier
        login
            Provider name and provider key
        """

    @abstractmethod
    async def delete(self, user_id: str, login: UserLoginInfo) -> None:
        """
        Delete every row exactly matching the user and login.

        Deleting a login that is not stored is a no-op.

        Parameters
        ----------
        user_id
            The owning user's identifier
        login
            Provider name and provider key
        """

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[UserLoginInfo]:
        """
        List a user's logins.

        Parameters
        ----------
        user_id
            The owning user's identifier

        Returns
        -------
        Logins in insertion order
        """

    @abstractmethod
    async def find_user_id_by_login(
        self,
        login_provider: str,
        provider_key: str,
    ) -> str | None:
        """
        Find the user that owns a login.

        Parameters
        ----------
        login_provider
            Provider name, e.g. "google"
        provider_key
            The user's key at that provider

        Returns
        -------
        The user id if the login is stored, None otherwise
        """

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> int:
        """
        Delete all logins of a user.

        Returns
        -------
        Number of rows deleted
        """
