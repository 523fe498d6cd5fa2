"""Ownership policy: only the user who created a destination may change or delete it."""

import logging
from typing import Protocol

from app.core.errors import ForbiddenError

logger = logging.getLogger(__name__)


class Owned(Protocol):
    id: int
    user_id: int


def is_owner(acting_user_id: int, resource: Owned) -> bool:
    """Strict single-owner check; there is no administrator override."""
    return acting_user_id == resource.user_id


def ensure_owner(acting_user_id: int, resource: Owned, action: str = "modify") -> None:
    """Raise ForbiddenError unless acting_user_id owns resource."""
    if not is_owner(acting_user_id, resource):
        logger.warning(
            "Ownership denied: user=%s action=%s resource=%s owner=%s",
            acting_user_id,
            action,
            resource.id,
            resource.user_id,
        )
        raise ForbiddenError(f"You do not have permission to {action} this destination")
