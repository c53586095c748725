from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..remote.client import ScriptClient
from .model import AdminAccount
from .repository import AdminRepository


class ScriptAdminRepository(AdminRepository):
    def __init__(self, client: ScriptClient):
        self._client = client

    def verify_admin(self, email: str, password: str) -> Optional[Mapping[str, Any]]:
        body = self._client.post_data("verifyAdmin", {"email": email, "password": password})
        if not body.get("verified"):
            return None
        return body

    def refresh_session(self, *, token: str) -> Optional[Mapping[str, Any]]:
        body = self._client.fetch_data("refreshSession", token=token)
        if not body.get("verified"):
            return None
        return body

    def logout(self, *, token: str) -> None:
        self._client.post_data("logout", {}, token=token)

    def change_password(self, *, current_password: str, new_password: str, token: Optional[str] = None) -> str:
        body = self._client.post_data(
            "changePassword",
            {"currentPassword": current_password, "newPassword": new_password},
            token=token,
        )
        return str(body.get("message") or "")

    def list_admins(self, *, token: Optional[str] = None) -> List[AdminAccount]:
        body = self._client.fetch_data("listAdmins", token=token)
        return [AdminAccount.from_payload(a) for a in body.get("data") or [] if isinstance(a, dict)]

    def add_admin(self, *, email: str, password: str, permissions: Mapping[str, Any], token: Optional[str] = None) -> str:
        body = self._client.post_data(
            "addAdmin",
            {"email": email, "password": password, "permissions": dict(permissions)},
            token=token,
        )
        return str(body.get("message") or "Admin added.")

    def delete_admin(self, *, email: str, token: Optional[str] = None) -> str:
        body = self._client.post_data("deleteAdmin", {"email": email}, token=token)
        return str(body.get("message") or "Admin deleted.")

    def update_permissions(self, *, email: str, permissions: Mapping[str, Any], token: Optional[str] = None) -> str:
        body = self._client.post_data(
            "updateAdminPermissions",
            {"email": email, "permissions": dict(permissions)},
            token=token,
        )
        return str(body.get("message") or "Permissions updated.")
