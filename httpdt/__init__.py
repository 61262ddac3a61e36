"""httpdt: HTTP Date header timestamps.

Generates the IMF-fixdate value HTTP clients and servers put in the Date
header, from integer seconds since the Unix epoch, with no timezone
database.

    from httpdt import Datetime
    Datetime.new().for_header()  # 'Sun, 06 Nov 1994 08:49:37 GMT'
"""

from .cache import DateHeaderCache
from .calendar import CivilFields, decompose
from .datetime import Datetime
from .exceptions import ClockUnavailable, HttpdtError, InvalidInstant
from .header import format_imf_fixdate

__all__ = [
    "CivilFields",
    "ClockUnavailable",
    "DateHeaderCache",
    "Datetime",
    "HttpdtError",
    "InvalidInstant",
    "decompose",
    "format_imf_fixdate",
]
