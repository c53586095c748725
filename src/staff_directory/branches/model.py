from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple

from ..staff.model import StaffRecord


@dataclass(frozen=True)
class Branch:
    branch_name: str
    current_staff: Tuple[StaffRecord, ...] = ()
    former_staff: Tuple[StaffRecord, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Branch":
        name = str(payload.get("branchName") or "").strip()
        return cls(
            branch_name=name,
            current_staff=_records(name, payload.get("currentStaff"), is_former=False),
            former_staff=_records(name, payload.get("formerStaff"), is_former=True),
        )

    @property
    def all_staff(self) -> Tuple[StaffRecord, ...]:
        return self.current_staff + self.former_staff



def _records(branch_name: str, rows: Any, *, is_former: bool) -> Tuple[StaffRecord, ...]:
    # rows that are not objects are skipped
    if not isinstance(rows, Iterable) or isinstance(rows, (str, bytes, Mapping)):
        return ()
    return tuple(
        StaffRecord.from_payload(branch_name, row, is_former=is_former) for row in rows if isinstance(row, Mapping)
    )
