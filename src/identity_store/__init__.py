"""Identity store - persistence of user identity data.

This package keeps a User aggregate consistent with four persisted
collections:
- Users (account fields, password hash, security stamp, lockout state)
- External logins (provider + provider key)
- Claims (type + value)
- Role memberships

Password hashing, token issuance and sessions are left to the caller;
password hashes and security stamps are stored as opaque strings.
"""

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
from identity_store.application.services import IdentityStore
from identity_store.domain.user import (
    LOCKOUT_END_MIN,
    NO_LOCKOUT,
    Claim,
    User,
    UserClaimRepository,
    UserLoginInfo,
    UserLoginRepository,
    UserRecordRepository,
    UserRoleRepository,
)
from identity_store.exceptions import (
    IdentityStoreError,
    InvalidArgumentError,
    InvalidStateError,
)

__all__ = [
    # Domain - User
    "LOCKOUT_END_MIN",
    "NO_LOCKOUT",
    "Claim",
    "User",
    "UserLoginInfo",
    # Repositories
    "UserClaimRepository",
    "UserLoginRepository",
    "UserRecordRepository",
    "UserRoleRepository",
    # Exceptions
    "IdentityStoreError",
    "InvalidArgumentError",
    "InvalidStateError",
    # Capabilities
    "ClaimCapable",
    "EmailCapable",
    "LockoutCapable",
    "LoginCapable",
    "PasswordCapable",
    "PhoneNumberCapable",
    "QueryableUserCapable",
    "RoleCapable",
    "SecurityStampCapable",
    "TwoFactorCapable",
    "UserStoreCapable",
    # Application Services
    "IdentityStore",
]
