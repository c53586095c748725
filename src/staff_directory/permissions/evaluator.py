"""Capability checks against a PermissionSnapshot.

These checks are advisory: they decide what the UI offers and short-circuit
requests that would obviously be refused. The remote script enforces the same
rules and is the authority.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Optional, Union

from ..core.enums import Capability
from .model import PermissionSnapshot

CapabilityKey = Union[Capability, str]


def _is_super_admin(snapshot: Optional[PermissionSnapshot]) -> bool:
    return getattr(snapshot, "is_super_admin", False) is True


def has_capability(snapshot: Optional[PermissionSnapshot], capability: CapabilityKey) -> bool:
    if snapshot is None:
        return False
    if _is_super_admin(snapshot):
        return True

    rights = getattr(snapshot, "rights", None)
    if not isinstance(rights, Mapping):
        return False
    key = capability.value if isinstance(capability, Capability) else capability
    try:
        return rights.get(key, False) is True
    except TypeError:
        # unhashable capability key
        return False


def has_branch_access(snapshot: Optional[PermissionSnapshot], branch_name: Optional[str]) -> bool:
    if snapshot is None:
        return False
    if _is_super_admin(snapshot):
        return True

    branches = getattr(snapshot, "branches", None)
    if not isinstance(branches, (Set, list, tuple)) or not isinstance(branch_name, str):
        return False
    return branch_name in branches


def can_perform(snapshot: Optional[PermissionSnapshot], capability: CapabilityKey, branch_name: Optional[str]) -> bool:
    return has_capability(snapshot, capability) and has_branch_access(snapshot, branch_name)
