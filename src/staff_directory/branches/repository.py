from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Branch


class BranchRepository(Protocol):
    """Giao diện repository cho chi nhánh.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp vào script.
    """

    def list_branches(self) -> Sequence[Branch]:
        raise NotImplementedError

    def add_branch(self, branch_name: str, *, token: Optional[str] = None) -> str:
        raise NotImplementedError

    def delete_branch(self, branch_name: str, *, token: Optional[str] = None) -> str:
        raise NotImplementedError

    def rename_branch(self, old_name: str, new_name: str, *, token: Optional[str] = None) -> str:
        raise NotImplementedError
