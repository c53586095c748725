from __future__ import annotations

from types import MappingProxyType, SimpleNamespace

import pytest

from staff_directory.core.enums import Capability
from staff_directory.permissions.evaluator import can_perform, has_branch_access, has_capability
from staff_directory.permissions.model import PermissionSnapshot


def snapshot(rights=None, branches=(), super_admin=False) -> PermissionSnapshot:
    return PermissionSnapshot(
        is_super_admin=super_admin,
        rights=MappingProxyType(dict(rights or {})),
        branches=frozenset(branches),
    )


def test_missing_snapshot_denies_everything():
    assert has_capability(None, Capability.EDIT_STAFF) is False
    assert has_branch_access(None, "Dhaka") is False
    assert can_perform(None, Capability.DELETE_STAFF, "Dhaka") is False


@pytest.mark.parametrize("cap", list(Capability))
def test_super_admin_passes_with_empty_rights(cap):
    s = snapshot(super_admin=True)
    assert has_capability(s, cap)
    assert has_branch_access(s, "Anywhere")
    assert can_perform(s, cap, "Anywhere")


def test_super_admin_passes_with_malformed_contents():
    s = SimpleNamespace(is_super_admin=True, rights="garbage", branches=42)
    assert has_capability(s, Capability.MANAGE_ADMINS)
    assert has_branch_access(s, "Dhaka")


def test_rights_lookup_and_unknown_keys():
    s = snapshot({"editStaff": True, "deleteStaff": False})
    assert has_capability(s, Capability.EDIT_STAFF)
    assert has_capability(s, "editStaff")
    assert not has_capability(s, Capability.DELETE_STAFF)
    assert not has_capability(s, Capability.MOVE_STAFF)
    assert not has_capability(s, "launchRockets")


def test_malformed_snapshot_denies_without_raising():
    s = SimpleNamespace(is_super_admin="yes", rights=["editStaff"], branches="Dhaka")
    assert has_capability(s, Capability.EDIT_STAFF) is False
    assert has_branch_access(s, "Dhaka") is False
    assert has_capability(snapshot({"editStaff": True}), ["not", "hashable"]) is False


def test_branch_membership():
    s = snapshot(branches=["Dhaka", "Chittagong"])
    assert has_branch_access(s, "Dhaka")
    assert not has_branch_access(s, "Sylhet")
    assert not has_branch_access(s, None)


@pytest.mark.parametrize(
    "rights,branches,cap,branch",
    [
        ({"editStaff": True}, ["Dhaka"], Capability.EDIT_STAFF, "Dhaka"),
        ({"editStaff": True}, ["Dhaka"], Capability.EDIT_STAFF, "Sylhet"),
        ({"editStaff": False}, ["Dhaka"], Capability.EDIT_STAFF, "Dhaka"),
        ({}, [], Capability.DELETE_BRANCH, "Dhaka"),
    ],
)
def test_can_perform_is_conjunction(rights, branches, cap, branch):
    s = snapshot(rights, branches)
    assert can_perform(s, cap, branch) == (has_capability(s, cap) and has_branch_access(s, branch))


def test_snapshot_from_payload_coerces_sheet_values():
    s = PermissionSnapshot.from_payload(
        {
            "isSuperAdmin": "FALSE",
            "rights": {"editStaff": "TRUE", "deleteStaff": 0, "moveStaff": True},
            "branches": "Dhaka, Sylhet",
        }
    )
    assert s.is_super_admin is False
    assert dict(s.rights) == {"editStaff": True, "deleteStaff": False, "moveStaff": True}
    assert s.branches == frozenset({"Dhaka", "Sylhet"})


def test_snapshot_from_junk_payload_is_empty():
    s = PermissionSnapshot.from_payload("nope")
    assert s.is_super_admin is False
    assert dict(s.rights) == {}
    assert s.branches == frozenset()
    assert not has_capability(s, Capability.ADD_BRANCH)


def test_snapshot_is_immutable():
    s = snapshot({"editStaff": True})
    with pytest.raises(AttributeError):
        s.is_super_admin = True
    with pytest.raises(TypeError):
        s.rights["deleteStaff"] = True
