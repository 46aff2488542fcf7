"""Conversion between the stored lockout end and the value callers see.

The users table keeps the lockout end as a nullable naive UTC timestamp.
Callers always get a timezone-aware datetime back: the stored instant at
UTC, or ``NO_LOCKOUT`` when nothing is stored. Writing ``LOCKOUT_END_MIN``
(or ``None``) clears the stored value.
"""

from datetime import datetime, timezone

NO_LOCKOUT = datetime(1970, 1, 1, tzinfo=timezone.utc)
LOCKOUT_END_MIN = datetime.min.replace(tzinfo=timezone.utc)


def from_stored_lockout_end(value: datetime | None) -> datetime:
    """Map the stored naive timestamp to an aware UTC datetime."""
    if value is None:
        return NO_LOCKOUT
    return value.replace(tzinfo=timezone.utc)


def to_stored_lockout_end(value: datetime | None) -> datetime | None:
    """Map a caller-supplied lockout end to the stored naive UTC timestamp.

    Naive inputs are taken to already be UTC. Anything at or before
    ``LOCKOUT_END_MIN`` clears the stored value.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if value <= LOCKOUT_END_MIN:
        return None
    return value.astimezone(timezone.utc).replace(tzinfo=None)
