"""Write policies for the user's child collections.

Claims, logins and roles do not share one idempotency rule. Callers rely
on the exact behavior below, so it is spelled out as data rather than
scattered through the store:

    collection  add checks duplicates   remove needs in-memory match
    ----------  ---------------------   ----------------------------
    claims      yes                     no (delete always issued)
    logins      no (always inserted)    yes
    roles       yes (case-insensitive)  no (delete always issued)

When an add finds a duplicate, neither the in-memory list nor the
database is touched.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CollectionWritePolicy:
    """How add/remove on one child collection reach the database."""

    name: str
    add_checks_duplicates: bool
    remove_requires_match: bool


CLAIM_WRITE_POLICY = CollectionWritePolicy(
    name="claims",
    add_checks_duplicates=True,
    remove_requires_match=False,
)
LOGIN_WRITE_POLICY = CollectionWritePolicy(
    name="logins",
    add_checks_duplicates=False,
    remove_requires_match=True,
)
ROLE_WRITE_POLICY = CollectionWritePolicy(
    name="roles",
    add_checks_duplicates=True,
    remove_requires_match=False,
)


def role_names_equal(left: str, right: str) -> bool:
    """Role names compare case-insensitively."""
    return left.lower() == right.lower()
