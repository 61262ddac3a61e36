"""IMF-fixdate rendering for the HTTP Date header.

Produces the single format RFC 7231 requires senders to generate:

    Sun, 06 Nov 1994 08:49:37 GMT

The GMT suffix is always emitted. Instants are UTC, there is no offset layer.
"""

from .calendar import CivilFields

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Length of the full header value for years 1970 through 9999
IMF_FIXDATE_LENGTH = 29


def format_date(fields: CivilFields) -> str:
    """Render the date half, e.g. 'Sun, 06 Nov 1994'."""
    return (
        f"{WEEKDAY_NAMES[fields.weekday]}, {fields.day:02d} "
        f"{MONTH_NAMES[fields.month - 1]} {fields.year:04d}"
    )


def format_time(fields: CivilFields) -> str:
    """Render the time half, e.g. '08:49:37'."""
    return f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"


def format_imf_fixdate(fields: CivilFields) -> str:
    """
    Render civil fields as an IMF-fixdate header value.

    Years past 9999 are rendered in full rather than truncated, so the
    result is only guaranteed to be IMF_FIXDATE_LENGTH bytes up to 9999.

    Args:
        fields: Civil fields of the instant (UTC)

    Returns:
        ASCII header value ending in ' GMT'
    """
    return f"{format_date(fields)} {format_time(fields)} GMT"
