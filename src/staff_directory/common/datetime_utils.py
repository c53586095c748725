from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

# YYYY-MM-DD, YYYY/MM/DD, YYYY.MM.DD
_YEAR_FIRST = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})$")
# same, followed by a time part that fromisoformat could not read
_YEAR_FIRST_WITH_TIME = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})[T\s]")
# DD/MM/YYYY, DD.MM.YYYY, DD-MM-YYYY; day first even when both parts are <= 12
_DAY_FIRST = re.compile(r"^(\d{1,2})[/.-](\d{1,2})[/.-](\d{4})(?:\s.*)?$")

_FALLBACK_FORMATS = (
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%a %b %d %Y",
    "%Y%m%d",
)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _local_date(moment: datetime) -> date:
    # timezone-aware moments are read on the local calendar
    if moment.tzinfo is not None:
        return moment.astimezone().date()
    return moment.date()


def parse_flexible_date(value: object) -> Optional[date]:
    """Parse a spreadsheet date cell, returning None when it is not a date.

    Accepts date/datetime objects as-is. Strings are tried year-first, then
    day-first, then as ISO timestamps, then against a few written-out formats.
    Timestamps carrying a zone (``Z`` or an offset) give the local date.
    """
    if isinstance(value, datetime):
        return _local_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    m = _YEAR_FIRST.match(text)
    if m:
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _DAY_FIRST.match(text)
    if m:
        return _safe_date(int(m.group(3)), int(m.group(2)), int(m.group(1)))

    try:
        return _local_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    m = _YEAR_FIRST_WITH_TIME.match(text)
    if m:
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
