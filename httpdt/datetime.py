"""Datetime snapshot for HTTP clients and servers.

A Datetime wraps one RawInstant: whole seconds since the Unix epoch. It is
immutable. Refreshing a snapshot returns a new one and never touches the
instance it was called on, so a snapshot can be shared between threads
without locking.

    from httpdt import Datetime

    dt = Datetime.new()
    dt.for_header()        # 'Sun, 06 Nov 1994 08:49:37 GMT'

    # later, from the snapshot already held
    dt = dt.now()
    dt.for_header()
"""

from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .calendar import MAX_INSTANT, CivilFields, decompose
from .clock import Clock, read_clock
from .exceptions import InvalidInstant
from .header import format_imf_fixdate


@total_ordering
class Datetime(BaseModel):
    """
    Snapshot of a single instant, held as seconds since the Unix epoch.

    Construction:
    - Datetime(): the epoch, 1970-01-01T00:00:00Z
    - Datetime.new(): the current time from the clock
    - dt.now(): a fresh snapshot from the clock, leaving dt as it was
    - dt.set(secs): a snapshot for an explicit seconds value

    Civil fields are derived on demand and never stored on the snapshot.
    """

    model_config = ConfigDict(frozen=True)

    secs: int = Field(
        default=0, ge=0, strict=True, description="Seconds since the Unix epoch"
    )

    @field_validator("secs")
    @classmethod
    def check_supported_range(cls, v: int) -> int:
        """Reject instants past MAX_INSTANT."""
        if v > MAX_INSTANT:
            raise ValueError(f"must not exceed {MAX_INSTANT}")
        return v

    def __init__(self, secs: int = 0):
        try:
            super().__init__(secs=secs)
        except ValidationError as e:
            raise InvalidInstant(
                "Invalid instant",
                {"secs": repr(secs), "errors": e.errors(include_url=False)}
            ) from e

    @classmethod
    def new(cls, clock: Clock | None = None) -> "Datetime":
        """
        Create a snapshot of the current time.

        Args:
            clock: Clock to read (default: the host wall clock)

        Raises:
            ClockUnavailable: If the clock cannot supply a valid reading
        """
        return cls(read_clock(clock))

    def now(self, clock: Clock | None = None) -> "Datetime":
        """
        Return a new snapshot of the current time.

        Performs the same clock read and validation as Datetime.new().
        This snapshot is left unchanged.

        Raises:
            ClockUnavailable: If the clock cannot supply a valid reading
        """
        return self.set(read_clock(clock))

    def set(self, secs: int) -> "Datetime":
        """
        Return a new snapshot for secs seconds since the epoch.

        Raises:
            InvalidInstant: If secs is not an integer in 0..MAX_INSTANT
        """
        return type(self)(secs)

    def raw(self) -> int:
        """Seconds since the epoch held by this snapshot."""
        return self.secs

    def civil(self) -> CivilFields:
        """Civil calendar fields of this snapshot, in UTC."""
        return decompose(self.secs)

    def for_header(self) -> str:
        """Format this snapshot as an HTTP Date header value (IMF-fixdate)."""
        return format_imf_fixdate(self.civil())

    def __lt__(self, other):
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.secs < other.secs

    def __str__(self) -> str:
        return self.for_header()
