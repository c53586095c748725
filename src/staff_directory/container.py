from __future__ import annotations

from dataclasses import dataclass

from .admins.repository import AdminRepository
from .admins.script_admin_repository import ScriptAdminRepository
from .admins.service import AdminService, AuthService
from .branches.repository import BranchRepository
from .branches.script_branch_repository import ScriptBranchRepository
from .branches.service import BranchService, DirectoryService
from .remote.client import ScriptClient
from .staff.repository import StaffRepository
from .staff.script_staff_repository import ScriptStaffRepository
from .staff.service import StaffService
from .status.service import StatusService


@dataclass(frozen=True)
class Container:
    branches_repo: BranchRepository
    staff_repo: StaffRepository
    admins_repo: AdminRepository

    directory_service: DirectoryService
    branch_service: BranchService
    staff_service: StaffService
    auth_service: AuthService
    admin_service: AdminService
    status_service: StatusService


def build_services(
    *,
    branches_repo: BranchRepository,
    staff_repo: StaffRepository,
    admins_repo: AdminRepository,
) -> Container:
    return Container(
        branches_repo=branches_repo,
        staff_repo=staff_repo,
        admins_repo=admins_repo,
        directory_service=DirectoryService(branches_repo),
        branch_service=BranchService(branches_repo),
        staff_service=StaffService(staff_repo),
        auth_service=AuthService(admins_repo),
        admin_service=AdminService(admins_repo),
        status_service=StatusService(),
    )


def build_container(*, script_url: str, timeout: float) -> Container:
    client = ScriptClient(script_url, timeout=timeout)
    return build_services(
        branches_repo=ScriptBranchRepository(client),
        staff_repo=ScriptStaffRepository(client),
        admins_repo=ScriptAdminRepository(client),
    )
