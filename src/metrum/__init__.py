"""metrum public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from loguru import logger

from .api import (
    now,
    from_utc,
    from_datetime,
    from_timestamp,
    timestamp,
    parse,
    set_clock,
    get_clock,
)
from .core.calendar import is_leap_year, days_in_year, days_in_month, year_day
from .core.clock import UtcFields, system_clock, fixed_clock
from .core.errors import MetrumError, TimeError, TimeErrorKind, ParseError
from .core.types import MetrumDate, MetrumTime, MetrumDateTime

# Library stays silent unless the application enables it.
logger.disable("metrum")

__all__ = [
    "now",
    "from_utc",
    "from_datetime",
    "from_timestamp",
    "timestamp",
    "parse",
    "set_clock",
    "get_clock",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "year_day",
    "UtcFields",
    "system_clock",
    "fixed_clock",
    "MetrumError",
    "TimeError",
    "TimeErrorKind",
    "ParseError",
    "MetrumDate",
    "MetrumTime",
    "MetrumDateTime",
]
