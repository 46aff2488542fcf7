from identity_store.domain.user.value_objects.claim import Claim
from identity_store.domain.user.value_objects.lockout import (
    LOCKOUT_END_MIN,
    NO_LOCKOUT,
    from_stored_lockout_end,
    to_stored_lockout_end,
)
from identity_store.domain.user.value_objects.login_info import UserLoginInfo

__all__ = [
    "LOCKOUT_END_MIN",
    "NO_LOCKOUT",
    "Claim",
    "UserLoginInfo",
    "from_stored_lockout_end",
    "to_stored_lockout_end",
]
