"""Clock collaborator for reading the current time.

The wall clock is the only impure input to httpdt. It is modelled as a
zero-argument callable returning seconds since the Unix epoch, so tests and
host applications can substitute their own source:

    from httpdt.clock import FixedClock, read_clock
    read_clock(FixedClock(784111777))  # 784111777

read_clock() is the single place a reading is validated. Anything that is
not a non-negative, finite, in-range number becomes ClockUnavailable.
"""

import logging
import math
import time
from typing import Protocol

from .calendar import MAX_INSTANT
from .exceptions import ClockUnavailable

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


class Clock(Protocol):
    """Anything callable with no arguments that returns seconds since epoch."""

    def __call__(self) -> int | float: ...


class SystemClock:
    """Host wall clock, truncated to whole seconds without float rounding."""

    def __call__(self) -> int:
        return time.time_ns() // NANOSECONDS_PER_SECOND


class FixedClock:
    """Clock that returns a set reading until told otherwise.

    Useful for tests and for replaying a known instant.
    """

    def __init__(self, reading: int | float = 0):
        self.reading = reading

    def __call__(self) -> int | float:
        return self.reading

    def advance(self, seconds: int = 1) -> None:
        """Move the reading forward by seconds."""
        self.reading += seconds


system_clock = SystemClock()


def read_clock(clock: Clock | None = None) -> int:
    """
    Read the clock and return whole seconds since the Unix epoch.

    Args:
        clock: Clock to read (default: the host wall clock)

    Returns:
        Non-negative integer seconds, at most MAX_INSTANT

    Raises:
        ClockUnavailable: If the read fails or yields an invalid value
    """
    if clock is None:
        clock = system_clock

    try:
        reading = clock()
    except Exception as e:
        logger.warning(f"Clock read failed: {e}")
        raise ClockUnavailable("Clock read failed", {"error": str(e)}) from e

    if isinstance(reading, bool) or not isinstance(reading, (int, float)):
        logger.warning(f"Clock returned a non-numeric reading: {reading!r}")
        raise ClockUnavailable(
            "Clock returned a non-numeric reading",
            {"reading": repr(reading)}
        )

    if isinstance(reading, float) and not math.isfinite(reading):
        logger.warning(f"Clock returned a non-finite reading: {reading!r}")
        raise ClockUnavailable(
            "Clock returned a non-finite reading",
            {"reading": repr(reading)}
        )

    if reading < 0:
        logger.warning(f"Clock reading precedes the epoch: {reading!r}")
        raise ClockUnavailable(
            "Clock reading precedes the epoch",
            {"reading": repr(reading)}
        )

    # Truncation is flooring for non-negative values
    seconds = int(reading)

    if seconds > MAX_INSTANT:
        logger.warning(f"Clock reading exceeds supported range: {reading!r}")
        raise ClockUnavailable(
            "Clock reading exceeds supported range",
            {"reading": repr(reading), "max": MAX_INSTANT}
        )

    return seconds
