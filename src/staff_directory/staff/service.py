from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..admins.model import AdminSession
from ..common.headers import normalize_fields
from ..common.validators import require_non_empty
from ..core.constants import FULL_NAME
from ..core.enums import Capability
from ..core.exceptions import ValidationError
from ..permissions.guard import require_capability
from .model import PhotoUpload
from .repository import StaffRepository

logger = logging.getLogger(__name__)

# keys the form sends alongside the sheet columns
_CONTROL_KEYS = {"branchName", "rowIndex", "isFormer", "photo"}


class StaffService:
    """Use case: add/edit/delete/move staff rows (admin)."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def save_staff(
        self,
        admin: Optional[AdminSession],
        *,
        branch_name: str,
        fields: Mapping[str, Any],
        row_index: Optional[int] = None,
        is_former: bool = False,
        photo: Optional[PhotoUpload] = None,
    ) -> str:
        branch_name = require_non_empty(branch_name, "Branch name")
        admin = require_capability(admin, Capability.EDIT_STAFF, branches=[branch_name])
        if photo is not None:
            require_capability(admin, Capability.UPDATE_PHOTOS, branches=[branch_name])

        clean = {k: ("" if v is None else v) for k, v in normalize_fields(fields).items() if k not in _CONTROL_KEYS}
        clean[FULL_NAME] = require_non_empty(clean.get(FULL_NAME, ""), "Full name")

        action = "adding" if row_index is None else f"editing row {row_index} in"
        logger.info("%s %s staff of %s", admin.email, action, branch_name)
        return self._staff.save_staff(
            branch_name=branch_name,
            fields=clean,
            row_index=row_index,
            is_former=is_former,
            photo=photo,
            token=admin.token,
        )

    def delete_staff(self, admin: Optional[AdminSession], *, branch_name: str, row_index: int) -> str:
        branch_name = require_non_empty(branch_name, "Branch name")
        admin = require_capability(admin, Capability.DELETE_STAFF, branches=[branch_name])

        logger.info("%s deleting row %s of %s", admin.email, row_index, branch_name)
        return self._staff.delete_staff(branch_name=branch_name, row_index=row_index, token=admin.token)

    def move_staff(self, admin: Optional[AdminSession], *, from_branch: str, to_branch: str, row_index: int) -> str:
        from_branch = require_non_empty(from_branch, "Branch name")
        to_branch = require_non_empty(to_branch, "Target branch")
        admin = require_capability(admin, Capability.MOVE_STAFF, branches=[from_branch, to_branch])
        if from_branch == to_branch:
            raise ValidationError("Staff is already in this branch.")

        logger.info("%s moving row %s from %s to %s", admin.email, row_index, from_branch, to_branch)
        return self._staff.move_staff(
            from_branch=from_branch,
            to_branch=to_branch,
            row_index=row_index,
            token=admin.token,
        )
