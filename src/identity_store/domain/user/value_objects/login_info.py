from dataclasses import dataclass


@dataclass(frozen=True)
class UserLoginInfo:
    """An external login: the provider name and the user's key at that provider.

    Two logins are the same login when both fields are equal, compared
    as exact (case-sensitive) strings.
    """

    login_provider: str
    provider_key: str
