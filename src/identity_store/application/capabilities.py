"""Capability interfaces for the identity store.

Each interface groups one family of operations so that callers needing
only, say, claim management can depend on ``ClaimCapable`` instead of the
whole store. ``IdentityStore`` implements all of them.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from identity_store.domain.user import Claim, User, UserLoginInfo


class UserStoreCapable(ABC):
    """Create, update, delete and look up users."""

    @abstractmethod
    async def create(self, user: User) -> None: ...

    @abstractmethod
    async def update(self, user: User) -> None: ...

    @abstractmethod
    async def delete(self, user: User) -> None: ...

    @abstractmethod
    async def find_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def find_by_name(self, user_name: str | None) -> User | None: ...


class LoginCapable(ABC):
    """External logins (provider + provider key) of a user."""

    @abstractmethod
    async def add_login(self, user: User, login: UserLoginInfo) -> None: ...

    @abstractmethod
    async def remove_login(self, user: User, login: UserLoginInfo) -> None: ...

    @abstractmethod
    async def get_logins(self, user: User) -> list[UserLoginInfo]: ...

    @abstractmethod
    async def find_by_login(
        self, login_provider: str, provider_key: str
    ) -> User | None: ...


class ClaimCapable(ABC):
    """Claims held by a user."""

    @abstractmethod
    async def get_claims(self, user: User) -> list[Claim]: ...

    @abstractmethod
    async def add_claim(self, user: User, claim: Claim) -> None: ...

    @abstractmethod
    async def remove_claim(self, user: User, claim: Claim) -> None: ...


class RoleCapable(ABC):
    """Role memberships; role names compare case-insensitively."""

    @abstractmethod
    async def add_to_role(self, user: User, role_name: str) -> None: ...

    @abstractmethod
    async def remove_from_role(self, user: User, role_name: str) -> None: ...

    @abstractmethod
    async def get_roles(self, user: User) -> list[str]: ...

    @abstractmethod
    async def is_in_role(self, user: User, role_name: str) -> bool: ...


class PasswordCapable(ABC):
    @abstractmethod
    async def set_password_hash(self, user: User, password_hash: str | None) -> None: ...

    @abstractmethod
    async def get_password_hash(self, user: User) -> str | None: ...

    @abstractmethod
    async def has_password(self, user: User) -> bool: ...


class SecurityStampCapable(ABC):
    @abstractmethod
    async def set_security_stamp(self, user: User, stamp: str | None) -> None: ...

    @abstractmethod
    async def get_security_stamp(self, user: User) -> str | None: ...


class EmailCapable(ABC):
    @abstractmethod
    async def set_email(self, user: User, email: str | None) -> None: ...

    @abstractmethod
    async def get_email(self, user: User) -> str | None: ...

    @abstractmethod
    async def get_email_confirmed(self, user: User) -> bool: ...

    @abstractmethod
    async def set_email_confirmed(self, user: User, confirmed: bool) -> None: ...

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None: ...


class LockoutCapable(ABC):
    """Lockout end date, lockout flag and failed access counting."""

    @abstractmethod
    async def get_lockout_end_date(self, user: User) -> datetime: ...

    @abstractmethod
    async def set_lockout_end_date(
        self, user: User, lockout_end: datetime | None
    ) -> None: ...

    @abstractmethod
    async def increment_access_failed_count(self, user: User) -> int: ...

    @abstractmethod
    async def reset_access_failed_count(self, user: User) -> None: ...

    @abstractmethod
    async def get_access_failed_count(self, user: User) -> int: ...

    @abstractmethod
    async def get_lockout_enabled(self, user: User) -> bool: ...

    @abstractmethod
    async def set_lockout_enabled(self, user: User, enabled: bool) -> None: ...


class TwoFactorCapable(ABC):
    @abstractmethod
    async def set_two_factor_enabled(self, user: User, enabled: bool) -> None: ...

    @abstractmethod
    async def get_two_factor_enabled(self, user: User) -> bool: ...


class PhoneNumberCapable(ABC):
    @abstractmethod
    async def set_phone_number(self, user: User, phone_number: str | None) -> None: ...

    @abstractmethod
    async def get_phone_number(self, user: User) -> str | None: ...

    @abstractmethod
    async def get_phone_number_confirmed(self, user: User) -> bool: ...

    @abstractmethod
    async def set_phone_number_confirmed(self, user: User, confirmed: bool) -> None: ...


class QueryableUserCapable(ABC):
    """Enumerate persisted users (child collections are not loaded)."""

    @abstractmethod
    async def users(self, *criteria: Any) -> list[User]: ...

    @abstractmethod
    async def count_users(self) -> int: ...
