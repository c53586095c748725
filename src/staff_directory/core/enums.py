from __future__ import annotations

from enum import Enum


class Capability(str, Enum):
    """Quyền thao tác của admin, khóa trùng với bảng quyền trên spreadsheet."""

    ADD_BRANCH = "addBranch"
    DELETE_BRANCH = "deleteBranch"
    RENAME_BRANCH = "renameBranch"
    EDIT_STAFF = "editStaff"
    DELETE_STAFF = "deleteStaff"
    MOVE_STAFF = "moveStaff"
    UPDATE_PHOTOS = "updatePhotos"
    MANAGE_PERMISSIONS = "managePermissions"
    MANAGE_ADMINS = "manageAdmins"


class TenureCategory(str, Enum):
    """Trạng thái xét tăng lương."""

    NEEDS_APPROVAL = "NEEDS_APPROVAL"
    ONGOING = "ONGOING"


class ReferenceKind(str, Enum):
    """Which date the tenure was measured from."""

    INCREMENT = "INCREMENT"
    JOINING = "JOINING"
