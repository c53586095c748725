from __future__ import annotations

from typing import Any, Mapping, Optional

from ..remote.client import ScriptClient
from .model import PhotoUpload
from .repository import StaffRepository


class ScriptStaffRepository(StaffRepository):
    def __init__(self, client: ScriptClient):
        self._client = client

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
        payload = {"branchName": branch_name, **fields}
        # the script appends a new row when rowIndex is blank
        payload["rowIndex"] = "" if row_index is None else row_index
        payload["isFormer"] = bool(is_former)
        if photo is not None:
            payload["photo"] = photo.to_payload()
        body = self._client.post_data("saveStaff", payload, token=token)
        return str(body.get("message") or "Staff saved.")

    def delete_staff(self, *, branch_name: str, row_index: int, token: Optional[str] = None) -> str:
        body = self._client.post_data("deleteStaff", {"branchName": branch_name, "rowIndex": row_index}, token=token)
        return str(body.get("message") or "Staff deleted.")

    def move_staff(self, *, from_branch: str, to_branch: str, row_index: int, token: Optional[str] = None) -> str:
        body = self._client.post_data(
            "moveStaff",
            {"fromBranch": from_branch, "toBranch": to_branch, "rowIndex": row_index},
            token=token,
        )
        return str(body.get("message") or "Staff moved.")
