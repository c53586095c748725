from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..admins.model import AdminSession
from ..core.constants import DENIED_MESSAGE
from ..core.exceptions import AuthenticationError, AuthorizationError
from .evaluator import CapabilityKey, can_perform, has_capability

logger = logging.getLogger(__name__)


def require_session(admin: Optional[AdminSession]) -> AdminSession:
    if admin is None:
        raise AuthenticationError("Please log in as admin to continue.")
    return admin


def require_capability(
    admin: Optional[AdminSession],
    capability: CapabilityKey,
    *,
    branches: Iterable[str] = (),
) -> AdminSession:
    """Raise unless the admin holds ``capability`` on every listed branch.

    With no branches only the capability itself is checked.
    """
    admin = require_session(admin)
    snapshot = admin.permissions

    names = list(branches)
    allowed = all(can_perform(snapshot, capability, b) for b in names) if names else has_capability(snapshot, capability)
    if not allowed:
        logger.info("Denied %s for %s on %s", getattr(capability, "value", capability), admin.email, names or "-")
        raise AuthorizationError(DENIED_MESSAGE)
    return admin
