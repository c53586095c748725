from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional

from ..core.enums import Capability

_TRUTHY = {"true", "yes", "y", "1", "on"}


def _as_bool(value: Any) -> bool:
    # spreadsheet checkboxes come back as booleans, but hand-typed cells are strings
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return False


def _normalize_rights(raw: Any) -> Mapping[str, bool]:
    if not isinstance(raw, Mapping):
        return MappingProxyType({})
    rights = {}
    for key, value in raw.items():
        if isinstance(key, Capability):
            key = key.value
        if isinstance(key, str) and key.strip():
            rights[key.strip()] = _as_bool(value)
    return MappingProxyType(rights)


def _normalize_branches(raw: Any) -> FrozenSet[str]:
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(b.strip() for b in raw if isinstance(b, str) and b.strip())


@dataclass(frozen=True)
class PermissionSnapshot:
    """Immutable view of one admin session's capabilities and branch scope.

    A new snapshot replaces the old one on login/refresh; nothing edits it in
    place.
    """

    is_super_admin: bool = False
    rights: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))
    branches: FrozenSet[str] = frozenset()

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "PermissionSnapshot":
        """Build from the remote script's permission object, tolerating junk."""
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            is_super_admin=_as_bool(payload.get("isSuperAdmin", False)),
            rights=_normalize_rights(payload.get("rights")),
            branches=_normalize_branches(payload.get("branches")),
        )

    def to_payload(self) -> dict:
        return {
            "isSuperAdmin": self.is_super_admin,
            "rights": dict(self.rights),
            "branches": sorted(self.branches),
        }
