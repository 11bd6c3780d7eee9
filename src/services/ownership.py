"""Ownership checks for mutable resources."""

import logging

from src.errors import AuthorizationError

logger = logging.getLogger(__name__)


def _canonical_id(value: int | str) -> str:
    return str(value).strip()


def authorize(acting_user_id: int | str, owner_id: int | str) -> bool:
    """Return True when ``acting_user_id`` owns the resource."""
    if acting_user_id is None or owner_id is None:
        return False
    return _canonical_id(acting_user_id) == _canonical_id(owner_id)


def ensure_owner(
    acting_user_id: int | str,
    owner_id: int | str,
    detail: str = "User not authorized",
) -> None:
    """Raise AuthorizationError unless ``acting_user_id`` owns the resource."""
    if not authorize(acting_user_id, owner_id):
        logger.warning(f"User {acting_user_id} denied mutation of resource owned by {owner_id}")
        raise AuthorizationError(detail)
