from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AdminAccount


class AdminRepository(Protocol):
    """Admin credentials and permissions kept by the remote script."""

    def verify_admin(self, email: str, password: str) -> Optional[Mapping[str, Any]]:
        """Return the verification body, or None when credentials are rejected."""
        raise NotImplementedError

    def refresh_session(self, *, token: str) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError

    def logout(self, *, token: str) -> None:
        raise NotImplementedError

    def change_password(self, *, current_password: str, new_password: str, token: Optional[str] = None) -> str:
        raise NotImplementedError

    def list_admins(self, *, token: Optional[str] = None) -> Sequence[AdminAccount]:
        raise NotImplementedError

    def add_admin(self, *, email: str, password: str, permissions: Mapping[str, Any], token: Optional[str] = None) -> str:
        raise NotImplementedError

    def delete_admin(self, *, email: str, token: Optional[str] = None) -> str:
        raise NotImplementedError

    def update_permissions(self, *, email: str, permissions: Mapping[str, Any], token: Optional[str] = None) -> str:
        raise NotImplementedError
