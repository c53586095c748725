"""Staff tenure classification (raise review).

Every function here is total: malformed dates are treated as missing and no
input raises.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from ..common.datetime_utils import as_date, days_in_month, now_local, parse_flexible_date
from ..core.constants import INCREMENT_DATE, JOINING_DATE
from ..core.enums import TenureCategory
from .model import Elapsed, TenureClassification
from .rules.base import ApprovalRule
from .rules.increment_rule import IncrementRule
from .rules.joining_rule import JoiningRule

_UNITS = (("Year", "Years"), ("Month", "Months"), ("Day", "Days"))


def elapsed_between(start: date, end: date) -> Elapsed:
    """(years, months, days) from start to end, borrowing real month lengths.

    A start date after end yields zero elapsed.
    """
    if start >= end:
        return Elapsed(years=0, months=0, days=0, total_days=0)

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        borrow_year, borrow_month = (end.year, end.month - 1) if end.month > 1 else (end.year - 1, 12)
        # a start day past the end of the borrowed month counts from its last day
        days += max(days_in_month(borrow_year, borrow_month), start.day)
    if months < 0:
        years -= 1
        months += 12

    return Elapsed(years=years, months=months, days=days, total_days=(end - start).days)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    fields = getattr(record, "fields", None)
    if isinstance(fields, Mapping):
        return fields.get(name)
    return None


def _candidates(record: Any) -> Sequence[Tuple[Any, ApprovalRule]]:
    return (
        (_field(record, INCREMENT_DATE), IncrementRule()),
        (_field(record, JOINING_DATE), JoiningRule()),
    )


def classify(record: Any, now: Optional[Union[date, datetime]] = None) -> TenureClassification:
    """Classify a staff record (a StaffRecord or a raw header->value mapping)."""
    today = as_date(now if now is not None else now_local())

    for raw, rule in _candidates(record):
        reference = parse_flexible_date(raw)
        if reference is None:
            continue
        elapsed = elapsed_between(reference, today)
        category = TenureCategory.NEEDS_APPROVAL if rule.is_due(elapsed) else TenureCategory.ONGOING
        return TenureClassification(
            category=category,
            reference_kind=rule.reference_kind,
            reference_date=reference,
            elapsed=elapsed,
        )

    return TenureClassification(category=TenureCategory.ONGOING)


def format_elapsed(elapsed: Elapsed) -> str:
    parts = []
    for value, (singular, plural) in zip((elapsed.years, elapsed.months, elapsed.days), _UNITS):
        if value:
            parts.append(f"{value} {singular if value == 1 else plural}")

    if not parts:
        return "Today"
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + " and " + parts[-1]
