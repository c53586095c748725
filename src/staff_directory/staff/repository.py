from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .model import PhotoUpload


class StaffRepository(Protocol):
    def save_staff(
        self,
        *,
        branch_name: str,
        fields: Mapping[str, Any],
        row_index: Optional[int],
        is_former: bool,
        photo: Optional[PhotoUpload] = None,
        token: Optional[str] = None,
    ) -> str:
        raise NotImplementedError

    def delete_staff(self, *, branch_name: str, row_index: int, token: Optional[str] = None) -> str:
        raise NotImplementedError

    def move_staff(self, *, from_branch: str, to_branch: str, row_index: int, token: Optional[str] = None) -> str:
        raise NotImplementedError
