from __future__ import annotations

from ...core.constants import INCREMENT_APPROVAL_DAYS, INCREMENT_APPROVAL_YEARS
from ...core.enums import ReferenceKind
from ..model import Elapsed
from .base import ApprovalRule


class IncrementRule(ApprovalRule):
    """A year since the last increment.

    The day count catches spans the y/m/d breakdown under-reports after
    borrowing.
    """

    reference_kind = ReferenceKind.INCREMENT

    def is_due(self, elapsed: Elapsed) -> bool:
        return elapsed.years >= INCREMENT_APPROVAL_YEARS or elapsed.total_days >= INCREMENT_APPROVAL_DAYS
