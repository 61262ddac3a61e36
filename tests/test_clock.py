"""Tests for clock module."""

import logging
import time

import pytest

from httpdt.calendar import MAX_INSTANT
from httpdt.clock import FixedClock, SystemClock, read_clock
from httpdt.exceptions import ClockUnavailable


def failing_clock():
    """Clock whose read raises an OS error."""
    raise OSError("clock_gettime failed")


def crashed_clock():
    """Clock whose driver raises a non-OS error."""
    raise RuntimeError("clock driver gone")


class TestSystemClock:
    """Tests for SystemClock."""

    def test_returns_int(self):
        """Should return whole seconds as an int."""
        assert isinstance(SystemClock()(), int)

    def test_matches_host_time(self):
        """Should agree with the host clock to the second."""
        before = time.time_ns() // 1_000_000_000
        reading = SystemClock()()
        after = time.time_ns() // 1_000_000_000
        assert before <= reading <= after


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_reading(self):
        """Should return the reading it was given."""
        assert FixedClock(42)() == 42

    def test_defaults_to_epoch(self):
        """Default reading should be zero."""
        assert FixedClock()() == 0

    def test_advance(self):
        """advance() should move the reading forward."""
        clock = FixedClock(10)
        clock.advance()
        assert clock() == 11
        clock.advance(59)
        assert clock() == 70


class TestReadClock:
    """Tests for read_clock function."""

    def test_reads_default_clock(self):
        """Without a clock argument it should read the wall clock."""
        before = time.time_ns() // 1_000_000_000
        reading = read_clock()
        assert isinstance(reading, int)
        assert reading >= before

    def test_returns_integer_reading(self):
        """Integer readings should pass through unchanged."""
        assert read_clock(FixedClock(784111777)) == 784111777

    def test_accepts_zero(self):
        """The epoch itself is a valid reading."""
        assert read_clock(FixedClock(0)) == 0

    def test_truncates_float_reading(self):
        """Fractional seconds should be dropped."""
        assert read_clock(FixedClock(784111777.999)) == 784111777

    def test_accepts_max_instant(self):
        """The largest supported instant should be accepted."""
        assert read_clock(FixedClock(MAX_INSTANT)) == MAX_INSTANT

    def test_rejects_negative_reading(self):
        """Readings before the epoch should raise ClockUnavailable."""
        with pytest.raises(ClockUnavailable) as exc_info:
            read_clock(FixedClock(-1))
        assert exc_info.value.details == {"reading": "-1"}

    def test_rejects_negative_fraction(self):
        """A reading just before the epoch should not truncate to zero."""
        with pytest.raises(ClockUnavailable):
            read_clock(FixedClock(-0.5))

    def test_rejects_out_of_range_reading(self):
        """Readings past MAX_INSTANT should raise ClockUnavailable."""
        with pytest.raises(ClockUnavailable):
            read_clock(FixedClock(MAX_INSTANT + 1))

    @pytest.mark.parametrize("reading", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_reading(self, reading):
        """NaN and infinities should raise ClockUnavailable."""
        with pytest.raises(ClockUnavailable):
            read_clock(FixedClock(reading))

    @pytest.mark.parametrize("reading", [None, "784111777", True])
    def test_rejects_non_numeric_reading(self, reading):
        """Non-numeric readings should raise ClockUnavailable."""
        with pytest.raises(ClockUnavailable):
            read_clock(FixedClock(reading))

    def test_wraps_failed_read(self):
        """An error raised by the clock should surface as ClockUnavailable."""
        with pytest.raises(ClockUnavailable) as exc_info:
            read_clock(failing_clock)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.details == {"error": "clock_gettime failed"}

    def test_wraps_any_clock_error(self):
        """Errors of any kind raised by the clock should become ClockUnavailable."""
        with pytest.raises(ClockUnavailable) as exc_info:
            read_clock(crashed_clock)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.details == {"error": "clock driver gone"}

    def test_wraps_broken_clock_object(self):
        """A clock that cannot be called properly should become ClockUnavailable."""
        with pytest.raises(ClockUnavailable) as exc_info:
            read_clock(lambda unexpected: 0)
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_logs_warning_on_failure(self, caplog):
        """A rejected reading should be logged at warning level."""
        with caplog.at_level(logging.WARNING, logger="httpdt.clock"):
            with pytest.raises(ClockUnavailable):
                read_clock(FixedClock(-1))
        assert "precedes the epoch" in caplog.text
