from __future__ import annotations

from enum import Enum
from typing import Any


class MetrumError(Exception):
    """Base error."""


class TimeErrorKind(Enum):
    INVALID_DAY = "InvalidDay"
    INVALID_MINUTE = "InvalidMinute"
    INVALID_TICK = "InvalidTick"
    INVALID_SUBTICK = "InvalidSubtick"

    INVALID_UTC_MONTH = "InvalidUtcMonth"
    INVALID_UTC_DAY = "InvalidUtcDay"
    INVALID_UTC_HOUR = "InvalidUtcHour"
    INVALID_UTC_MINUTE = "InvalidUtcMinute"
    INVALID_UTC_SECOND = "InvalidUtcSecond"
    INVALID_UTC_NANO = "InvalidUtcNano"


class TimeError(MetrumError, ValueError):
    """Raised when a date or time field is out of range.

    ``kind`` names the first invalid field; ``value`` is what was supplied.
    """

    def __init__(self, kind: TimeErrorKind, value: Any, detail: str = "") -> None:
        self.kind = kind
        self.value = value
        msg = f"{kind.value}: {value!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class ParseError(MetrumError, ValueError):
    """Raised when text is not a Metrum date/time rendering."""
