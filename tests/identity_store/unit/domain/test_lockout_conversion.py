"""Unit tests for lockout end conversion."""

from datetime import datetime, timedelta, timezone

from identity_store.domain.user import (
    LOCKOUT_END_MIN,
    NO_LOCKOUT,
    from_stored_lockout_end,
    to_stored_lockout_end,
)


class TestFromStoredLockoutEnd:
    def test_absent_reads_as_epoch(self):
        assert from_stored_lockout_end(None) == NO_LOCKOUT
        assert NO_LOCKOUT == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_stored_value_reads_as_utc(self):
        stored = datetime(2030, 5, 1, 12, 30)

        result = from_stored_lockout_end(stored)

        assert result == datetime(2030, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc


class TestToStoredLockoutEnd:
    def test_min_sentinel_clears(self):
        assert to_stored_lockout_end(LOCKOUT_END_MIN) is None

    def test_naive_min_clears(self):
        """A naive datetime.min is reinterpreted as UTC and also clears."""
        assert to_stored_lockout_end(datetime.min) is None

    def test_none_clears(self):
        assert to_stored_lockout_end(None) is None

    def test_aware_value_converted_to_naive_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2030, 5, 1, 14, 0, tzinfo=plus_two)

        assert to_stored_lockout_end(value) == datetime(2030, 5, 1, 12, 0)

    def test_naive_value_stored_verbatim(self):
        value = datetime(2030, 5, 1, 14, 0)

        assert to_stored_lockout_end(value) == value

    def test_round_trip_of_sentinel_gives_epoch(self):
        result = from_stored_lockout_end(to_stored_lockout_end(LOCKOUT_END_MIN))

        assert result == NO_LOCKOUT
        assert result != LOCKOUT_END_MIN

    def test_value_before_min_with_positive_offset_clears(self):
        plus_one = timezone(timedelta(hours=1))
        value = datetime(1, 1, 1, 0, 30, tzinfo=plus_one)

        assert to_stored_lockout_end(value) is None
