from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import DENIED_MESSAGE, INVALID_CREDENTIALS_MESSAGE, MIN_PASSWORD_LENGTH
from ..core.enums import Capability
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..permissions.evaluator import has_branch_access, has_capability
from ..permissions.guard import require_capability, require_session
from ..permissions.model import PermissionSnapshot
from .model import AdminAccount, AdminSession
from .repository import AdminRepository

logger = logging.getLogger(__name__)

_KNOWN_CAPABILITIES = {c.value for c in Capability}


class AuthService:
    """Use case: admin login/logout and own credentials."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def login(self, email: str, password: str) -> AdminSession:
        email = (email or "").strip()
        if not email or not password:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        body = self._admins.verify_admin(email, password)
        if not body:
            logger.info("Login rejected for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        admin = AdminSession.from_verify_response(email, body)
        logger.info("Admin %s logged in (super=%s)", admin.email, admin.permissions.is_super_admin)
        return admin

    def refresh(self, admin: Optional[AdminSession]) -> AdminSession:
        """Fetch a fresh permission snapshot; the old session is discarded."""
        admin = require_session(admin)
        body = self._admins.refresh_session(token=admin.token)
        if not body:
            raise AuthenticationError("Session expired. Please log in again.")
        return AdminSession.from_verify_response(admin.email, {"token": admin.token, **body})

    def logout(self, admin: Optional[AdminSession]) -> None:
        if admin is None or not admin.token:
            return
        self._admins.logout(token=admin.token)
        logger.info("Admin %s logged out", admin.email)

    def change_password(self, admin: Optional[AdminSession], *, current_password: str, new_password: str) -> str:
        admin = require_session(admin)
        require_non_empty(current_password, "Current password")
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)
        if new_password == current_password:
            raise ValidationError("New password must be different from the current one.")

        message = self._admins.change_password(
            current_password=current_password,
            new_password=new_password,
            token=admin.token,
        )
        if message != "Success":
            raise ValidationError(message or "Password was not changed.")
        logger.info("Admin %s changed password", admin.email)
        return message


def _permissions_payload(
    rights: Optional[Mapping[str, Any]],
    branches: Optional[Iterable[str]],
    is_super_admin: bool,
) -> dict:
    rights = dict(rights or {})
    unknown = sorted(k for k in rights if k not in _KNOWN_CAPABILITIES)
    if unknown:
        raise ValidationError(f"Unknown permissions: {', '.join(unknown)}")
    snapshot = PermissionSnapshot.from_payload(
        {"isSuperAdmin": is_super_admin, "rights": rights, "branches": list(branches or [])}
    )
    return snapshot.to_payload()


class AdminService:
    """Use case: manage admin accounts and their permissions."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def list_admins(self, admin: Optional[AdminSession]) -> Sequence[AdminAccount]:
        admin = require_capability(admin, Capability.MANAGE_ADMINS)
        return self._admins.list_admins(token=admin.token)

    def add_admin(
        self,
        admin: Optional[AdminSession],
        *,
        email: str,
        password: str,
        rights: Optional[Mapping[str, Any]] = None,
        branches: Optional[Iterable[str]] = None,
        is_super_admin: bool = False,
    ) -> str:
        admin = require_capability(admin, Capability.MANAGE_ADMINS)
        email = require_non_empty(email, "Email").lower()
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        permissions = _permissions_payload(rights, branches, is_super_admin)
        self._check_grant(admin, permissions)

        logger.info("%s adding admin %s", admin.email, email)
        return self._admins.add_admin(email=email, password=password, permissions=permissions, token=admin.token)

    def delete_admin(self, admin: Optional[AdminSession], *, email: str) -> str:
        admin = require_capability(admin, Capability.MANAGE_ADMINS)
        email = require_non_empty(email, "Email")
        if email.lower() == admin.email.lower():
            raise ValidationError("You cannot delete your own admin account.")

        logger.info("%s deleting admin %s", admin.email, email)
        return self._admins.delete_admin(email=email, token=admin.token)

    def update_permissions(
        self,
        admin: Optional[AdminSession],
        *,
        email: str,
        rights: Optional[Mapping[str, Any]] = None,
        branches: Optional[Iterable[str]] = None,
        is_super_admin: bool = False,
    ) -> str:
        admin = require_capability(admin, Capability.MANAGE_PERMISSIONS)
        email = require_non_empty(email, "Email")
        permissions = _permissions_payload(rights, branches, is_super_admin)
        self._check_grant(admin, permissions)
        if not admin.permissions.is_super_admin and self._is_super_admin_account(admin, email):
            _deny(admin, f"change permissions of super admin {email}")

        logger.info("%s updating permissions of %s", admin.email, email)
        return self._admins.update_permissions(email=email, permissions=permissions, token=admin.token)

    def _is_super_admin_account(self, admin: AdminSession, email: str) -> bool:
        wanted = email.lower()
        for account in self._admins.list_admins(token=admin.token):
            if account.email.lower() == wanted:
                return account.permissions.is_super_admin
        return False

    @staticmethod
    def _check_grant(admin: AdminSession, permissions: Mapping[str, Any]) -> None:
        """A non super admin can only hand out rights and branches it holds itself."""
        snapshot = admin.permissions
        if snapshot.is_super_admin:
            return
        if permissions.get("isSuperAdmin"):
            _deny(admin, "grant super admin")
        for key, granted in permissions.get("rights", {}).items():
            if granted and not has_capability(snapshot, key):
                _deny(admin, f"grant {key}")
        for branch in permissions.get("branches", []):
            if not has_branch_access(snapshot, branch):
                _deny(admin, f"grant branch {branch}")


def _deny(admin: AdminSession, action: str) -> None:
    logger.info("Denied %s: %s", admin.email, action)
    raise AuthorizationError(DENIED_MESSAGE)
