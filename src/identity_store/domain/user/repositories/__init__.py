from identity_store.domain.user.repositories.user_claim_repository import (
    UserClaimRepository,
)
from identity_store.domain.user.repositories.user_login_repository import (
    UserLoginRepository,
)
from identity_store.domain.user.repositories.user_record_repository import (
    UserRecordRepository,
)
from identity_store.domain.user.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "UserClaimRepository",
    "UserLoginRepository",
    "UserRecordRepository",
    "UserRoleRepository",
]
