"""Identity store service.

Keeps a ``User`` aggregate consistent with the four record stores (users,
logins, claims, roles):

- Lookups return ``None`` on a miss and populate the aggregate's logins,
  claims and roles on a hit (see ``populate``).
- Collection mutators change the in-memory list and write to the matching
  record store in the same call, following the write policies in
  ``identity_store.domain.user.policies``.
- Scalar setters only touch memory; ``update`` persists them in one write.

The in-memory change and the database write are not atomic. If a mutator
raises, the aggregate no longer matches storage: roll back the session and
re-fetch it. Nothing here coordinates concurrent callers either: two
independently loaded copies of a user can both pass the duplicate check in
``add_claim``, and only the unique constraints on the child tables stop the
second insert.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, TypeVar

from identity_store.application.capabilities import (
    ClaimCapable,
    EmailCapable,
    LockoutCapable,
    LoginCapable,
    PasswordCapable,
    PhoneNumberCapable,
    QueryableUserCapable,
    RoleCapable,
    SecurityStampCapable,
    TwoFactorCapable,
    UserStoreCapable,
)
from identity_store.domain.user import (
    CLAIM_WRITE_POLICY,
    LOGIN_WRITE_POLICY,
    ROLE_WRITE_POLICY,
    Claim,
    CollectionWritePolicy,
    User,
    UserClaimRepository,
    UserLoginInfo,
    UserLoginRepository,
    UserRecordRepository,
    UserRoleRepository,
    from_stored_lockout_end,
    role_names_equal,
    to_stored_lockout_end,
)
from identity_store.exceptions import InvalidArgumentError, InvalidStateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(argument)


def _require_id(user: User, operation: str) -> None:
    if not user.id:
        raise InvalidStateError(
            f"user.id must be assigned before calling {operation}"
        )


class IdentityStore(
    UserStoreCapable,
    LoginCapable,
    ClaimCapable,
    RoleCapable,
    PasswordCapable,
    SecurityStampCapable,
    EmailCapable,
    LockoutCapable,
    TwoFactorCapable,
    PhoneNumberCapable,
    QueryableUserCapable,
):
    """Single façade over the user, login, claim and role record stores."""

    def __init__(
        self,
        user_repository: UserRecordRepository,
        login_repository: UserLoginRepository,
        claim_repository: UserClaimRepository,
        role_repository: UserRoleRepository,
    ):
        self._users = user_repository
        self._logins = login_repository
        self._claims = claim_repository
        self._roles = role_repository

    # Population

    async def populate(self, user: User) -> User:
        """Load the user's roles, claims and logins into the aggregate.

        Every lookup calls this on a hit. Call it directly for a ``User``
        obtained some other way (constructed, or from ``users()``) before
        reading its collections.
        """
        _require(user, "user")
        roles = await self._roles.list_by_user(user.id)
        claims = await self._claims.list_by_user(user.id)
        logins = await self._logins.list_by_user(user.id)
        user.load_collections(roles=roles, claims=claims, logins=logins)
        return user

    # Lookups

    async def find_by_id(self, user_id: str) -> User | None:
        if not user_id:
            return None

        user = await self._users.find_by_id(user_id)
        if user is None:
            return None
        return await self.populate(user)

    async def find_by_name(self, user_name: str | None) -> User | None:
        if user_name is None:
            return None

        user = await self._users.find_by_name(user_name)
        return await self._populate_if_complete(user)

    async def find_by_email(self, email: str) -> User | None:
        _require(email, "email")

        user = await self._users.find_by_email(email)
        return await self._populate_if_complete(user)

    async def find_by_login(
        self, login_provider: str, provider_key: str
    ) -> User | None:
        _require(login_provider, "login_provider")
        _require(provider_key, "provider_key")

        user_id = await self._logins.find_user_id_by_login(
            login_provider, provider_key
        )
        if not user_id:
            return None
        return await self.find_by_id(user_id)

    async def users(self, *criteria: Any) -> list[User]:
        if criteria:
            return await self._users.query(*criteria)
        return await self._users.list_all()

    async def count_users(self) -> int:
        return await self._users.count()

    async def _populate_if_complete(self, user: User | None) -> User | None:
        # Name and email lookups only accept rows that have an email
        if user is None or not user.email:
            if user is not None:
                logger.debug("Ignoring user without email: %s", user.id)
            return None
        return await self.populate(user)

    # User rows

    async def create(self, user: User) -> None:
        _require(user, "user")
        _require_id(user, "create")
        await self._users.insert(user)

    async def update(self, user: User) -> None:
        _require(user, "user")
        _require_id(user, "update")
        await self._users.update(user)

    async def delete(self, user: User) -> None:
        """Delete the user row. Logins, claims and roles are left in place."""
        _require(user, "user")
        await self._users.delete(user.id)

    async def delete_with_all_data(self, user: User) -> None:
        """Delete the user's logins, claims and roles, then the user row."""
        _require(user, "user")
        await self._logins.delete_all_for_user(user.id)
        await self._claims.delete_all_for_user(user.id)
        await self._roles.delete_all_for_user(user.id)
        await self._users.delete(user.id)
        logger.info("Deleted user and all associated data: %s", user.id)

    # Claims

    async def get_claims(self, user: User) -> list[Claim]:
        _require(user, "user")
        return list(user.claims)

    async def add_claim(self, user: User, claim: Claim) -> None:
        _require(user, "user")
        _require(claim, "claim")
        await self._add_to_collection(
            CLAIM_WRITE_POLICY,
            user.claims,
            Claim(claim.claim_type, claim.claim_value),
            lambda a, b: a.matches(b.claim_type, b.claim_value),
            lambda: self._claims.insert(user.id, claim),
        )

    async def remove_claim(self, user: User, claim: Claim) -> None:
        _require(user, "user")
        _require(claim, "claim")
        await self._remove_from_collection(
            CLAIM_WRITE_POLICY,
            user.claims,
            claim,
            lambda a, b: a.matches(b.claim_type, b.claim_value),
            lambda: self._claims.delete(user.id, claim),
        )

    # Logins

    async def get_logins(self, user: User) -> list[UserLoginInfo]:
        _require(user, "user")
        return list(user.logins)

    async def add_login(self, user: User, login: UserLoginInfo) -> None:
        """Append the login and insert its row, even when it is already present.

        The login table is unique on (provider, key, user), so adding the same
        login twice raises ``IntegrityError`` on the second insert. The session
        is then unusable until the caller rolls it back; re-fetching the user
        is not enough.
        """
        _require(user, "user")
        _require(login, "login")
        await self._add_to_collection(
            LOGIN_WRITE_POLICY,
            user.logins,
            UserLoginInfo(login.login_provider, login.provider_key),
            lambda a, b: a == b,
            lambda: self._logins.insert(user.id, login),
        )

    async def remove_login(self, user: User, login: UserLoginInfo) -> None:
        _require(user, "user")
        _require(login, "login")
        await self._remove_from_collection(
            LOGIN_WRITE_POLICY,
            user.logins,
            login,
            lambda a, b: a == b,
            lambda: self._logins.delete(user.id, login),
        )

    # Roles

    async def get_roles(self, user: User) -> list[str]:
        _require(user, "user")
        return list(user.roles)

    async def is_in_role(self, user: User, role_name: str) -> bool:
        _require(user, "user")
        return any(role_names_equal(role, role_name) for role in user.roles)

    async def add_to_role(self, user: User, role_name: str) -> None:
        _require(user, "user")
        _require(role_name, "role_name")
        await self._add_to_collection(
            ROLE_WRITE_POLICY,
            user.roles,
            role_name,
            role_names_equal,
            lambda: self._roles.insert(user.id, role_name),
        )

    async def remove_from_role(self, user: User, role_name: str) -> None:
        _require(user, "user")
        _require(role_name, "role_name")
        await self._remove_from_collection(
            ROLE_WRITE_POLICY,
            user.roles,
            role_name,
            role_names_equal,
            lambda: self._roles.delete(user.id, role_name),
        )

    async def _add_to_collection(
        self,
        policy: CollectionWritePolicy,
        items: list[T],
        value: T,
        same: Callable[[T, T], bool],
        insert: Callable[[], Awaitable[None]],
    ) -> None:
        if policy.add_checks_duplicates and any(same(item, value) for item in items):
            logger.debug("%s already contains %r, nothing written", policy.name, value)
            return

        items.append(value)
        await insert()

    async def _remove_from_collection(
        self,
        policy: CollectionWritePolicy,
        items: list[T],
        value: T,
        same: Callable[[T, T], bool],
        delete: Callable[[], Awaitable[None]],
    ) -> None:
        kept = [item for item in items if not same(item, value)]
        matched = len(kept) != len(items)
        items[:] = kept

        if matched or not policy.remove_requires_match:
            await delete()
        else:
            logger.debug("%s has no %r, nothing deleted", policy.name, value)

    # Password and security stamp

    async def set_password_hash(self, user: User, password_hash: str | None) -> None:
        _require(user, "user")
        user.password_hash = password_hash

    async def get_password_hash(self, user: User) -> str | None:
        _require(user, "user")
        return user.password_hash

    async def has_password(self, user: User) -> bool:
        _require(user, "user")
        return user.password_hash is not None

    async def set_security_stamp(self, user: User, stamp: str | None) -> None:
        _require(user, "user")
        user.security_stamp = stamp

    async def get_security_stamp(self, user: User) -> str | None:
        _require(user, "user")
        return user.security_stamp

    # Email

    async def set_email(self, user: User, email: str | None) -> None:
        _require(user, "user")
        user.email = email

    async def get_email(self, user: User) -> str | None:
        _require(user, "user")
        return user.email

    async def get_email_confirmed(self, user: User) -> bool:
        _require(user, "user")
        return user.email_confirmed

    async def set_email_confirmed(self, user: User, confirmed: bool) -> None:
        _require(user, "user")
        user.email_confirmed = confirmed

    # Lockout

    async def get_lockout_end_date(self, user: User) -> datetime:
        _require(user, "user")
        return from_stored_lockout_end(user.lockout_end_utc)

    async def set_lockout_end_date(
        self, user: User, lockout_end: datetime | None
    ) -> None:
        _require(user, "user")
        user.lockout_end_utc = to_stored_lockout_end(lockout_end)

    async def increment_access_failed_count(self, user: User) -> int:
        _require(user, "user")
        user.access_failed_count += 1
        return user.access_failed_count

    async def reset_access_failed_count(self, user: User) -> None:
        _require(user, "user")
        user.access_failed_count = 0

    async def get_access_failed_count(self, user: User) -> int:
        _require(user, "user")
        return user.access_failed_count

    async def get_lockout_enabled(self, user: User) -> bool:
        _require(user, "user")
        return user.lockout_enabled

    async def set_lockout_enabled(self, user: User, enabled: bool) -> None:
        _require(user, "user")
        user.lockout_enabled = enabled

    # Two-factor

    async def set_two_factor_enabled(self, user: User, enabled: bool) -> None:
        _require(user, "user")
        user.two_factor_enabled = enabled

    async def get_two_factor_enabled(self, user: User) -> bool:
        _require(user, "user")
        return user.two_factor_enabled

    # Phone number

    async def set_phone_number(self, user: User, phone_number: str | None) -> None:
        _require(user, "user")
        user.phone_number = phone_number

    async def get_phone_number(self, user: User) -> str | None:
        _require(user, "user")
        return user.phone_number

    async def get_phone_number_confirmed(self, user: User) -> bool:
        _require(user, "user")
        return user.phone_number_confirmed

    async def set_phone_number_confirmed(self, user: User, confirmed: bool) -> None:
        _require(user, "user")
        user.phone_number_confirmed = confirmed
