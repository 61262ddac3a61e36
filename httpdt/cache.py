"""Shared current-time cell for servers stamping many responses.

A server sends far more responses than there are seconds in the day, and
the header value only changes once a second. DateHeaderCache keeps the
latest snapshot together with its formatted value and re-formats only when
a clock read lands on a new second.
"""

import logging
import threading

from .clock import Clock
from .datetime import Datetime

logger = logging.getLogger(__name__)


class DateHeaderCache:
    """
    Thread-safe holder of the current Datetime and its header value.

    Snapshots are immutable, so the lock only guards replacing the
    (snapshot, header) pair as a unit.
    """

    def __init__(self, clock: Clock | None = None):
        """Initialize the cache.

        Args:
            clock: Clock to read (default: the host wall clock)

        Raises:
            ClockUnavailable: If the first clock read fails
        """
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot = Datetime.new(clock)
        self._header = self._snapshot.for_header()

    @property
    def snapshot(self) -> Datetime:
        """Most recently stored snapshot, without reading the clock."""
        with self._lock:
            return self._snapshot

    def _advance(self) -> None:
        # Caller holds the lock
        current = self._snapshot.now(self._clock)
        if current.secs != self._snapshot.secs:
            logger.debug(f"Date header rolled over to {current.secs}")
            self._snapshot = current
            self._header = current.for_header()

    def refresh(self) -> Datetime:
        """
        Advance the stored snapshot to the current time.

        Returns:
            The snapshot now stored

        Raises:
            ClockUnavailable: If the clock cannot supply a valid reading;
                the stored snapshot is kept as it was
        """
        with self._lock:
            self._advance()
            return self._snapshot

    def header(self) -> str:
        """Return the header value for the current second."""
        with self._lock:
            self._advance()
            return self._header
