from __future__ import annotations

import io

import pytest

from staff_directory.admins.model import AdminAccount
from staff_directory.branches.model import Branch
from staff_directory.container import build_services
from staff_directory.core.constants import DENIED_MESSAGE
from staff_directory.core.exceptions import AuthorizationError
from staff_directory.main import create_app
from staff_directory.permissions.model import PermissionSnapshot


class FakeBranches:
    def __init__(self):
        self.calls = []

    def list_branches(self):
        return [
            Branch.from_payload(
                {
                    "branchName": "Dhaka",
                    "currentStaff": [
                        {"rowIndex": 2, "Full Name": "Rahim", "Designation": "Cashier", "Joining Date": "2020-01-01"},
                    ],
                    "formerStaff": [],
                }
            ),
            Branch.from_payload({"branchName": "Sylhet", "currentStaff": [], "formerStaff": []}),
        ]

    def add_branch(self, branch_name, *, token=None):
        self.calls.append(("add", branch_name, token))
        return "Branch created."

    def delete_branch(self, branch_name, *, token=None):
        # the script disagrees with the client and refuses
        raise AuthorizationError(DENIED_MESSAGE)

    def rename_branch(self, old_name, new_name, *, token=None):
        self.calls.append(("rename", old_name, new_name, token))
        return "Branch renamed."


class FakeStaff:
    def __init__(self):
        self.saved = None

    def save_staff(self, *, branch_name, fields, row_index, is_former, photo=None, token=None):
        self.saved = {"branch_name": branch_name, "fields": dict(fields), "row_index": row_index, "is_former": is_former, "photo": photo}
        return "Staff saved."

    def delete_staff(self, *, branch_name, row_index, token=None):
        return "Staff deleted."

    def move_staff(self, *, from_branch, to_branch, row_index, token=None):
        return "Staff moved."


class FakeAdmins:
    def verify_admin(self, email, password):
        if password != "secret1":
            return None
        return {
            "verified": True,
            "token": "tok-1",
            "isSuperAdmin": False,
            "rights": {"editStaff": True, "updatePhotos": True, "deleteBranch": True, "addBranch": True},
            "branches": ["Dhaka"],
        }

    def refresh_session(self, *, token):
        return None

    def logout(self, *, token):
        pass

    def change_password(self, *, current_password, new_password, token=None):
        return "Success"

    def list_admins(self, *, token=None):
        return [AdminAccount(email="a@example.com", permissions=PermissionSnapshot())]

    def add_admin(self, *, email, password, permissions, token=None):
        return "Admin added."

    def delete_admin(self, *, email, token=None):
        return "Admin deleted."

    def update_permissions(self, *, email, permissions, token=None):
        return "Permissions updated."


@pytest.fixture
def repos():
    return FakeBranches(), FakeStaff(), FakeAdmins()


@pytest.fixture
def client(repos):
    branches, staff, admins = repos
    app = create_app(build_services(branches_repo=branches, staff_repo=staff, admins_repo=admins))
    return app.test_client()


def login(client):
    res = client.post("/api/login", json={"email": "ops@example.com", "password": "secret1"})
    assert res.status_code == 200
    return res


def test_public_branch_listing_uses_fallback_photo(client):
    res = client.get("/api/branches")
    body = res.get_json()

    assert res.status_code == 200
    assert body["canAddBranch"] is False
    dhaka = body["data"][0]
    assert dhaka["currentStaff"][0]["Photo URL"] == "http://script.test/fallback.png"
    assert dhaka["formerStaff"] is None


def test_admin_sees_former_section(client):
    login(client)
    body = client.get("/api/branches").get_json()

    assert body["canAddBranch"] is True
    assert body["data"][0]["formerStaff"] == []


def test_search_endpoint(client):
    res = client.get("/api/branches/Dhaka/search?q=cash")
    assert [s["Full Name"] for s in res.get_json()["data"]] == ["Rahim"]

    assert client.get("/api/branches/Nowhere/search?q=x").status_code == 400


def test_login_failure_and_session(client):
    res = client.post("/api/login", json={"email": "ops@example.com", "password": "bad"})
    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid credentials."

    assert client.get("/api/session").get_json()["isAdmin"] is False
    login(client)
    session_body = client.get("/api/session").get_json()
    assert session_body["isAdmin"] is True
    assert session_body["branches"] == ["Dhaka"]


def test_logout_clears_session(client):
    login(client)
    client.post("/api/logout")

    assert client.get("/api/session").get_json()["isAdmin"] is False
    assert client.post("/api/branches", json={"branchName": "Khulna"}).status_code == 401


def test_client_and_remote_denial_look_the_same(client):
    login(client)

    local = client.patch("/api/branches/Dhaka", json={"newName": "Dhaka North"})
    remote = client.delete("/api/branches/Dhaka")

    assert local.status_code == remote.status_code == 403
    assert local.get_json() == remote.get_json() == {"status": "error", "message": DENIED_MESSAGE}


def test_add_branch(client, repos):
    login(client)
    res = client.post("/api/branches", json={"branchName": "Khulna"})

    assert res.status_code == 201
    assert repos[0].calls == [("add", "Khulna", "tok-1")]


def test_save_staff_with_uploaded_photo(client, repos):
    login(client)
    res = client.post(
        "/api/branches/Dhaka/staff",
        data={"Full Name": "Karim", "rowIndex": "", "isFormer": "true", "photo": (io.BytesIO(b"\x89PNG"), "my photo.png")},
        content_type="multipart/form-data",
    )

    assert res.status_code == 200
    saved = repos[1].saved
    assert saved["row_index"] is None
    assert saved["is_former"] is True
    assert saved["photo"].name == "my_photo.png"
    assert saved["photo"].base64.startswith("data:image/png;base64,")


def test_save_staff_bad_row(client):
    login(client)
    res = client.post("/api/branches/Dhaka/staff", json={"Full Name": "Karim", "rowIndex": "abc"})
    assert res.status_code == 400


def test_staff_status_requires_login(client):
    assert client.get("/api/staff-status").status_code == 401

    login(client)
    body = client.get("/api/staff-status?category=needs_approval").get_json()
    assert [r["fullName"] for r in body["data"]] == ["Rahim"]
    assert client.get("/api/staff-status?category=bogus").status_code == 400


def test_refresh_failure_logs_out(client):
    login(client)
    assert client.post("/api/session/refresh").status_code == 401
    assert client.get("/api/session").get_json()["isAdmin"] is False


def test_admin_endpoints_denied_without_rights(client):
    login(client)
    assert client.get("/api/admins").status_code == 403
    assert client.put("/api/admins/a@example.com/permissions", json={"rights": {}}).status_code == 403
