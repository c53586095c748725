from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..admins.model import AdminSession
from ..common.validators import require_non_empty
from ..core.enums import Capability
from ..core.exceptions import ValidationError
from ..permissions.guard import require_capability
from ..staff.model import StaffRecord
from ..tenure.classifier import classify, format_elapsed
from .model import Branch
from .repository import BranchRepository

logger = logging.getLogger(__name__)


def staff_matches(staff: StaffRecord, term: str, *, now: Optional[Union[date, datetime]] = None) -> bool:
    """Case-insensitive match on name, designation and tenure text."""
    needle = (term or "").strip().lower()
    if not needle:
        return True

    haystack = [staff.full_name, staff.designation]
    tenure = classify(staff, now)
    if tenure.elapsed is not None:
        haystack.append(format_elapsed(tenure.elapsed))
    return any(needle in value.lower() for value in haystack)


class DirectoryService:
    """Use case: load the directory and search inside a branch."""

    def __init__(self, branches: BranchRepository):
        self._branches = branches

    def load_branches(self) -> Sequence[Branch]:
        branches = self._branches.list_branches()
        logger.info("Loaded %d branches", len(branches))
        return branches

    def get_branch(self, branch_name: str) -> Branch:
        for branch in self.load_branches():
            if branch.branch_name == branch_name:
                return branch
        raise ValidationError(f'Branch "{branch_name}" not found.')

    def search_branch(
        self,
        branch: Branch,
        term: str,
        *,
        now: Optional[Union[date, datetime]] = None,
    ) -> List[StaffRecord]:
        return [s for s in branch.all_staff if staff_matches(s, term, now=now)]


class BranchService:
    """Use case: manage branch worksheets (admin)."""

    def __init__(self, branches: BranchRepository):
        self._branches = branches

    def add_branch(self, admin: Optional[AdminSession], branch_name: str) -> str:
        admin = require_capability(admin, Capability.ADD_BRANCH)
        branch_name = require_non_empty(branch_name, "Branch name")

        if any(b.branch_name == branch_name for b in self._branches.list_branches()):
            raise ValidationError(f'Branch "{branch_name}" already exists.')

        logger.info("%s adding branch %s", admin.email, branch_name)
        return self._branches.add_branch(branch_name, token=admin.token)

    def delete_branch(self, admin: Optional[AdminSession], branch_name: str) -> str:
        branch_name = require_non_empty(branch_name, "Branch name")
        admin = require_capability(admin, Capability.DELETE_BRANCH, branches=[branch_name])

        logger.info("%s deleting branch %s", admin.email, branch_name)
        return self._branches.delete_branch(branch_name, token=admin.token)

    def rename_branch(self, admin: Optional[AdminSession], old_name: str, new_name: str) -> str:
        old_name = require_non_empty(old_name, "Branch name")
        admin = require_capability(admin, Capability.RENAME_BRANCH, branches=[old_name])
        new_name = require_non_empty(new_name, "New branch name")

        if new_name == old_name:
            raise ValidationError("New branch name must be different.")
        if any(b.branch_name == new_name for b in self._branches.list_branches()):
            raise ValidationError(f'Branch "{new_name}" already exists.')

        logger.info("%s renaming branch %s -> %s", admin.email, old_name, new_name)
        return self._branches.rename_branch(old_name, new_name, token=admin.token)
