from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..permissions.model import PermissionSnapshot


@dataclass(frozen=True)
class AdminSession:
    """What we store into the Flask session after login."""

    email: str
    token: str
    permissions: PermissionSnapshot = field(default_factory=PermissionSnapshot)

    @classmethod
    def from_verify_response(cls, email: str, body: Mapping[str, Any]) -> "AdminSession":
        perms = body.get("permissions")
        return cls(
            email=str(body.get("email") or email),
            token=str(body.get("token") or ""),
            permissions=PermissionSnapshot.from_payload(perms if isinstance(perms, Mapping) else body),
        )

    def to_session(self) -> dict:
        return {"email": self.email, "token": self.token, "permissions": self.permissions.to_payload()}

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, Any]]) -> Optional["AdminSession"]:
        if not isinstance(data, Mapping) or not data.get("email"):
            return None
        return cls(
            email=str(data["email"]),
            token=str(data.get("token") or ""),
            permissions=PermissionSnapshot.from_payload(data.get("permissions")),
        )


@dataclass(frozen=True)
class AdminAccount:
    email: str
    permissions: PermissionSnapshot

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AdminAccount":
        perms = payload.get("permissions")
        return cls(
            email=str(payload.get("email") or "").strip(),
            permissions=PermissionSnapshot.from_payload(perms if isinstance(perms, Mapping) else payload),
        )

    def to_dict(self) -> dict:
        return {"email": self.email, **self.permissions.to_payload()}
