from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ReferenceKind, TenureCategory


@dataclass(frozen=True)
class Elapsed:
    """Calendar-aware difference between two dates."""

    years: int
    months: int
    days: int
    total_days: int


@dataclass(frozen=True)
class TenureClassification:
    """Derived raise-review status. Recomputed on every call, never stored."""

    category: TenureCategory
    reference_kind: Optional[ReferenceKind] = None
    reference_date: Optional[date] = None
    elapsed: Optional[Elapsed] = None
