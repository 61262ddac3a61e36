"""Seconds-since-epoch to civil calendar conversion.

This module turns a RawInstant (whole seconds elapsed since
1970-01-01T00:00:00Z) into the civil fields an HTTP Date header needs:
year, month, day, weekday, hour, minute and second.

All arithmetic is integer arithmetic on the proleptic Gregorian calendar.
Nothing here reads a clock, a locale or a timezone, so every function is
safe to call from any thread.

    from httpdt import calendar
    fields = calendar.decompose(784111777)
    fields.year, fields.month, fields.day  # (1994, 11, 6)
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Time unit constants
MINUTE_AS_SECONDS = 60
HOUR_AS_SECONDS = 60 * MINUTE_AS_SECONDS
DAY_AS_SECONDS = 24 * HOUR_AS_SECONDS

EPOCH_YEAR = 1970
# 1970-01-01 was a Thursday (0 = Sunday)
EPOCH_WEEKDAY = 4

# A Gregorian 400-year cycle holds the same number of days wherever it starts
CYCLE_AS_YEARS = 400
CYCLE_AS_DAYS = 146097

# Largest supported instant (unsigned 64-bit seconds)
MAX_INSTANT = 2**64 - 1

MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CivilFields(BaseModel):
    """Civil calendar decomposition of a single instant, in UTC.

    Attributes:
        year: Gregorian year (>= 1970)
        month: Month of year, 1-based
        day: Day of month, 1-based
        weekday: Day of week, 0 = Sunday
        hour: Hour of day
        minute: Minute of hour
        second: Second of minute

    The day is checked against the length of its month in its year.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=EPOCH_YEAR)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    weekday: int = Field(ge=0, le=6)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)

    @model_validator(mode="after")
    def check_day_in_month(self) -> "CivilFields":
        """Reject days past the end of the month, e.g. 31 Feb or 29 Feb 2100."""
        length = month_length(self.month, is_leap(self.year))
        if self.day > length:
            raise ValueError(
                f"day {self.day} out of range for month {self.month} of {self.year}"
            )
        return self


def is_leap(year: int) -> bool:
    """Return True if year is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_length(year: int) -> int:
    """Number of days in year."""
    return 366 if is_leap(year) else 365


def month_length(month: int, leap: bool) -> int:
    """Number of days in a 1-based month, given the year's leap status.

    Raises:
        ValueError: If month is not in 1..12
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and leap:
        return 29
    return MONTH_LENGTHS[month - 1]


def _resolve_year(days: int) -> tuple[int, int]:
    """Split whole days since epoch into (year, zero-based day of year)."""
    cycles, days = divmod(days, CYCLE_AS_DAYS)
    year = EPOCH_YEAR + cycles * CYCLE_AS_YEARS

    # At most 400 iterations after bucketing whole cycles
    length = year_length(year)
    while days >= length:
        days -= length
        year += 1
        length = year_length(year)

    return year, days


def _resolve_month(day_of_year: int, leap: bool) -> tuple[int, int]:
    """Split a zero-based day of year into (month, day of month), both 1-based."""
    month = 1
    length = month_length(month, leap)
    while day_of_year >= length:
        day_of_year -= length
        month += 1
        length = month_length(month, leap)

    return month, day_of_year + 1


def decompose(seconds: int) -> CivilFields:
    """
    Convert seconds since the Unix epoch into civil calendar fields.

    The function is total over non-negative integers. Rejecting negative
    input is the caller's job (see Datetime), so no check is made here.

    Args:
        seconds: Non-negative whole seconds since 1970-01-01T00:00:00Z

    Returns:
        CivilFields for the instant, in UTC
    """
    days, seconds_in_day = divmod(seconds, DAY_AS_SECONDS)

    hour = seconds_in_day // HOUR_AS_SECONDS
    minute = seconds_in_day % HOUR_AS_SECONDS // MINUTE_AS_SECONDS
    second = seconds_in_day % MINUTE_AS_SECONDS

    weekday = (days + EPOCH_WEEKDAY) % 7

    year, day_of_year = _resolve_year(days)
    month, day = _resolve_month(day_of_year, is_leap(year))

    return CivilFields(
        year=year,
        month=month,
        day=day,
        weekday=weekday,
        hour=hour,
        minute=minute,
        second=second,
    )


def _leap_years_through(year: int) -> int:
    """Count leap years from year 1 through year, inclusive."""
    return year // 4 - year // 100 + year // 400


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Count whole days from the epoch to a civil date.

    Args:
        year: Gregorian year (>= 1970)
        month: Month of year, 1-based
        day: Day of month, 1-based

    Returns:
        Days elapsed since 1970-01-01
    """
    leap_days = _leap_years_through(year - 1) - _leap_years_through(EPOCH_YEAR - 1)
    days = (year - EPOCH_YEAR) * 365 + leap_days

    leap = is_leap(year)
    for m in range(1, month):
        days += month_length(m, leap)

    return days + day - 1


def to_seconds(fields: CivilFields) -> int:
    """Rebuild seconds since the epoch from the year, month, day and time of day."""
    days = days_from_civil(fields.year, fields.month, fields.day)
    return (
        days * DAY_AS_SECONDS
        + fields.hour * HOUR_AS_SECONDS
        + fields.minute * MINUTE_AS_SECONDS
        + fields.second
    )
