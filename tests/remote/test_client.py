from __future__ import annotations

import json

import pytest
import requests

from staff_directory.branches.script_branch_repository import ScriptBranchRepository
from staff_directory.core.constants import DENIED_MESSAGE
from staff_directory.core.exceptions import AuthorizationError, RemoteServiceError
from staff_directory.remote.client import ScriptClient
from staff_directory.staff.model import PhotoUpload
from staff_directory.staff.script_staff_repository import ScriptStaffRepository

URL = "http://script.test/exec"


class FakeResponse:
    def __init__(self, body=None, status_code=200, text=None):
        self._body = body
        self.status_code = status_code
        self.text = text

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({"status": "success"})
        self.error = error
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append(("GET", url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def post(self, url, **kwargs):
        self.requests.append(("POST", url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_fetch_sends_function_and_params():
    session = FakeSession(FakeResponse({"status": "success", "data": []}))
    client = ScriptClient(URL, timeout=3, session=session)

    body = client.fetch_data("getInitialData", {"branch": "Dhaka"})

    method, url, kwargs = session.requests[0]
    assert (method, url) == ("GET", URL)
    assert kwargs["params"] == {"function": "getInitialData", "branch": "Dhaka"}
    assert kwargs["timeout"] == 3
    assert body["data"] == []


def test_post_sends_plain_text_json_and_token():
    session = FakeSession()
    client = ScriptClient(URL, session=session)

    client.post_data("addBranch", {"branchName": "Sylhet"}, token="tok-1")

    method, _, kwargs = session.requests[0]
    assert method == "POST"
    assert kwargs["params"] == {"function": "addBranch", "token": "tok-1"}
    assert kwargs["headers"] == {"Content-Type": "text/plain;charset=utf-8"}
    assert json.loads(kwargs["data"]) == {"branchName": "Sylhet"}


def test_remote_denial_reads_like_local_denial():
    session = FakeSession(FakeResponse({"status": "error", "code": "forbidden", "message": "No rights for Dhaka"}))
    client = ScriptClient(URL, session=session)

    with pytest.raises(AuthorizationError) as exc:
        client.post_data("deleteBranch", {"branchName": "Dhaka"})
    assert str(exc.value) == DENIED_MESSAGE


def test_http_403_is_denial():
    client = ScriptClient(URL, session=FakeSession(FakeResponse(status_code=403)))
    with pytest.raises(AuthorizationError):
        client.fetch_data("listAdmins")


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"status": "error", "message": "Sheet is locked"}),
        FakeResponse(status_code=500),
        FakeResponse(text="<html>oops</html>"),
        FakeResponse(["not", "an", "object"]),
    ],
)
def test_other_failures_are_remote_errors(response):
    client = ScriptClient(URL, session=FakeSession(response))
    with pytest.raises(RemoteServiceError):
        client.fetch_data("getInitialData")


def test_transport_error_is_remote_error():
    client = ScriptClient(URL, session=FakeSession(error=requests.ConnectionError("down")))
    with pytest.raises(RemoteServiceError):
        client.post_data("saveStaff", {})


def test_missing_url_is_rejected():
    with pytest.raises(ValueError):
        ScriptClient("")


def test_branch_repository_parses_initial_data():
    session = FakeSession(
        FakeResponse(
            {
                "status": "success",
                "data": [
                    {
                        "branchName": "Dhaka",
                        "currentStaff": [{"rowIndex": 2, "Full Name": "Rahim"}, None, "Karim"],
                        "formerStaff": [42],
                    },
                    "junk",
                ],
            }
        )
    )
    branches = ScriptBranchRepository(ScriptClient(URL, session=session)).list_branches()

    assert [b.branch_name for b in branches] == ["Dhaka"]
    assert [s.full_name for s in branches[0].current_staff] == ["Rahim"]
    assert branches[0].former_staff == ()


def test_branch_repository_requires_data_list():
    session = FakeSession(FakeResponse({"status": "success", "message": "ok"}))
    with pytest.raises(RemoteServiceError):
        ScriptBranchRepository(ScriptClient(URL, session=session)).list_branches()


def test_staff_repository_payload():
    session = FakeSession(FakeResponse({"status": "success", "message": "Saved!"}))
    repo = ScriptStaffRepository(ScriptClient(URL, session=session))

    msg = repo.save_staff(
        branch_name="Dhaka",
        fields={"Full Name": "Rahim"},
        row_index=None,
        is_former=False,
        photo=PhotoUpload(base64="data:image/png;base64,AA", name="r.png"),
        token="tok-1",
    )

    payload = json.loads(session.requests[0][2]["data"])
    assert msg == "Saved!"
    assert payload == {
        "branchName": "Dhaka",
        "Full Name": "Rahim",
        "rowIndex": "",
        "isFormer": False,
        "photo": {"base64": "data:image/png;base64,AA", "name": "r.png"},
    }
