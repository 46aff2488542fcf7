from identity_store.domain.user.aggregates.user import User

__all__ = ["User"]
