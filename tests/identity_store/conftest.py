"""
Pytest configuration for identity_store tests.

This conftest provides fixtures shared by the unit, persistence and
integration tests of the identity store.
"""

import pytest

from identity_store import Claim, User, UserLoginInfo
from tests.shared.fixtures.factories import make_claim, make_login, make_user


@pytest.fixture
def test_user() -> User:
    """Create the standard test user (id u1, alice, a@x.com)."""
    return make_user()


@pytest.fixture
def user_without_email() -> User:
    """Create a user whose email is empty."""
    return make_user(id="u2", user_name="bob", email="")


@pytest.fixture
def dept_claim() -> Claim:
    return make_claim()


@pytest.fixture
def google_login() -> UserLoginInfo:
    return make_login()
