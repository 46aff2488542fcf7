from identity_store.application.services.identity_store import IdentityStore

__all__ = ["IdentityStore"]
