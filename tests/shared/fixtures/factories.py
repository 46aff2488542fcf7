"""Factories for identity test data."""

from identity_store import Claim, User, UserLoginInfo

TEST_USER_ID = "u1"
TEST_USER_NAME = "alice"
TEST_USER_EMAIL = "a@x.com"


def make_user(
    id: str = TEST_USER_ID,
    user_name: str = TEST_USER_NAME,
    email: str | None = TEST_USER_EMAIL,
    **fields,
) -> User:
    """Build a user with sensible defaults; extra fields override scalars."""
    return User(id=id, user_name=user_name, email=email, **fields)


def make_claim(claim_type: str = "dept", claim_value: str = "eng") -> Claim:
    return Claim(claim_type=claim_type, claim_value=claim_value)


def make_login(
    login_provider: str = "google", provider_key: str = "g-123"
) -> UserLoginInfo:
    return UserLoginInfo(login_provider=login_provider, provider_key=provider_key)
