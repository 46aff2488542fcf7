"""User aggregate for identity persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from identity_store.domain.user.value_objects import Claim, UserLoginInfo


@dataclass(eq=False)
class User:
    """
    User aggregate root.

    Scalar fields mirror the ``users`` row. The ``logins``, ``claims`` and
    ``roles`` collections start empty and are filled once by the store when
    the user is looked up (``is_populated`` tells which state the instance
    is in). After that they are the source of truth for reads; the store
    never re-fetches them behind the caller's back.
    """

    user_name: str
    id: str = ""
    email: str | None = None
    email_confirmed: bool = False
    password_hash: str | None = None
    security_stamp: str | None = None
    phone_number: str | None = None
    phone_number_confirmed: bool = False
    two_factor_enabled: bool = False
    lockout_end_utc: datetime | None = None
    lockout_enabled: bool = False
    access_failed_count: int = 0
    logins: list[UserLoginInfo] = field(default_factory=list)
    claims: list[Claim] = field(default_factory=list)
    roles: list[str] = field(default_factory=list)
    _populated: bool = field(default=False, init=False, repr=False)

    @property
    def is_populated(self) -> bool:
        return self._populated

    def load_collections(
        self,
        roles: list[str],
        claims: list[Claim],
        logins: list[UserLoginInfo],
    ) -> None:
        """Replace the child collections with freshly loaded ones."""
        self.roles = list(roles)
        self.claims = list(claims)
        self.logins = list(logins)
        self._populated = True

    @classmethod
    def create(
        cls,
        user_name: str,
        email: str | None = None,
        id: str | None = None,
    ) -> User:
        return cls(user_name=user_name, email=email, id=id or str(uuid4()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, user_name={self.user_name})"
