from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from ..admins.model import AdminSession
from ..branches.model import Branch
from ..common.datetime_utils import as_date, now_local
from ..core.enums import ReferenceKind, TenureCategory
from ..permissions.evaluator import has_branch_access
from ..permissions.guard import require_session
from ..staff.model import StaffRecord
from ..tenure.classifier import classify, format_elapsed


@dataclass(frozen=True)
class StaffStatusRow:
    branch_name: str
    row_index: Optional[int]
    full_name: str
    designation: str
    category: TenureCategory
    reference_kind: Optional[ReferenceKind]
    reference_date: Optional[date]
    total_days: int
    elapsed_text: str

    def to_dict(self) -> dict:
        return {
            "branchName": self.branch_name,
            "rowIndex": self.row_index,
            "fullName": self.full_name,
            "designation": self.designation,
            "category": self.category.value,
            "referenceKind": self.reference_kind.value if self.reference_kind else None,
            "referenceDate": self.reference_date.strftime("%Y-%m-%d") if self.reference_date else None,
            "totalDays": self.total_days,
            "elapsed": self.elapsed_text,
        }


def _row(staff: StaffRecord, today: date) -> StaffStatusRow:
    tenure = classify(staff, today)
    return StaffStatusRow(
        branch_name=staff.branch_name,
        row_index=staff.row_index,
        full_name=staff.full_name,
        designation=staff.designation,
        category=tenure.category,
        reference_kind=tenure.reference_kind,
        reference_date=tenure.reference_date,
        total_days=tenure.elapsed.total_days if tenure.elapsed else 0,
        elapsed_text=format_elapsed(tenure.elapsed) if tenure.elapsed else "",
    )


class StatusService:
    """Use case: Staff Status (who is due for raise approval)."""

    def staff_status(
        self,
        admin: Optional[AdminSession],
        branches: Iterable[Branch],
        *,
        now: Optional[Union[date, datetime]] = None,
        category: Optional[TenureCategory] = None,
    ) -> List[StaffStatusRow]:
        admin = require_session(admin)
        today = as_date(now if now is not None else now_local())

        rows = []
        for branch in branches:
            if not has_branch_access(admin.permissions, branch.branch_name):
                continue
            for staff in branch.current_staff:
                row = _row(staff, today)
                if category is None or row.category == category:
                    rows.append(row)

        rows.sort(key=lambda r: (r.category != TenureCategory.NEEDS_APPROVAL, -r.total_days, r.full_name.lower()))
        return rows
