from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ReferenceKind
from ..model import Elapsed


class ApprovalRule(ABC):
    """Strategy Pattern: decide whether elapsed time makes a raise due."""

    reference_kind: ReferenceKind

    @abstractmethod
    def is_due(self, elapsed: Elapsed) -> bool:
        raise NotImplementedError
