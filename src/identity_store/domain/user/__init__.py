"""User domain: the identity aggregate and its persistence contracts.

This domain handles:
- User aggregate (account fields, logins, claims, roles)
- Login and claim value objects, lockout end conversion
- Write policies for the child collections
- Repository interfaces for the four record stores
"""

from identity_store.domain.user.aggregates import User
from identity_store.domain.user.policies import (
    CLAIM_WRITE_POLICY,
    LOGIN_WRITE_POLICY,
    ROLE_WRITE_POLICY,
    CollectionWritePolicy,
    role_names_equal,
)
from identity_store.domain.user.repositories import (
    UserClaimRepository,
    UserLoginRepository,
    UserRecordRepository,
    UserRoleRepository,
)
from identity_store.domain.user.value_objects import (
    LOCKOUT_END_MIN,
    NO_LOCKOUT,
    Claim,
    UserLoginInfo,
    from_stored_lockout_end,
    to_stored_lockout_end,
)

__all__ = [
    "CLAIM_WRITE_POLICY",
    "LOCKOUT_END_MIN",
    "LOGIN_WRITE_POLICY",
    "NO_LOCKOUT",
    "ROLE_WRITE_POLICY",
    "Claim",
    "CollectionWritePolicy",
    "User",
    "UserClaimRepository",
    "UserLoginInfo",
    "UserLoginRepository",
    "UserRecordRepository",
    "UserRoleRepository",
    "from_stored_lockout_end",
    "role_names_equal",
    "to_stored_lockout_end",
]
