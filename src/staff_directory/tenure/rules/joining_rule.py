from __future__ import annotations

from ...core.constants import JOINING_APPROVAL_DAYS, JOINING_APPROVAL_MONTHS
from ...core.enums import ReferenceKind
from ..model import Elapsed
from .base import ApprovalRule


class JoiningRule(ApprovalRule):
    """Six months since joining, for staff who never had an increment."""

    reference_kind = ReferenceKind.JOINING

    def is_due(self, elapsed: Elapsed) -> bool:
        months = elapsed.years * 12 + elapsed.months
        return months >= JOINING_APPROVAL_MONTHS or elapsed.total_days >= JOINING_APPROVAL_DAYS
