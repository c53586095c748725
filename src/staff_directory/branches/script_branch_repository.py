from __future__ import annotations

from typing import List, Optional

from ..core.exceptions import RemoteServiceError
from ..remote.client import ScriptClient
from .model import Branch
from .repository import BranchRepository


class ScriptBranchRepository(BranchRepository):
    def __init__(self, client: ScriptClient):
        self._client = client

    def list_branches(self) -> List[Branch]:
        body = self._client.fetch_data("getInitialData")
        data = body.get("data")
        if not isinstance(data, list):
            raise RemoteServiceError("Directory service returned no branch data")
        return [Branch.from_payload(b) for b in data if isinstance(b, dict)]

    def add_branch(self, branch_name: str, *, token: Optional[str] = None) -> str:
        body = self._client.post_data("addBranch", {"branchName": branch_name}, token=token)
        return str(body.get("message") or "Branch added.")

    def delete_branch(self, branch_name: str, *, token: Optional[str] = None) -> str:
        body = self._client.post_data("deleteBranch", {"branchName": branch_name}, token=token)
        return str(body.get("message") or "Branch deleted.")

    def rename_branch(self, old_name: str, new_name: str, *, token: Optional[str] = None) -> str:
        body = self._client.post_data("renameBranch", {"oldName": old_name, "newName": new_name}, token=token)
        return str(body.get("message") or "Branch renamed.")
