"""Identity store exceptions.

These exceptions are raised by the identity_store package for caller
mistakes. Lookups that find nothing return ``None`` instead of raising,
and failures from the database layer propagate unchanged.
"""


class IdentityStoreError(Exception):
    """Base exception for all identity store errors."""

    def __init__(self, message: str = "Identity store error"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(IdentityStoreError, ValueError):
    """Raised when a required argument (user, login, email) is missing."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None")


class InvalidStateError(IdentityStoreError):
    """Raised when a user aggregate is not in a state the operation accepts.

    Creating or updating a user requires its id to be assigned first.
    """

    def __init__(self, message: str = "User id must be assigned"):
        super().__init__(message)
