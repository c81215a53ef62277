import logging

from fastapi import Depends, HTTPException, status

from app.core.security import get_current_user
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

INSUFFICIENT_PERMISSIONS = "Access denied. Insufficient permissions."


def _forbidden(user: CurrentUser, required: set[str]) -> HTTPException:
    logger.warning(
        f"Forbidden for user {user.id}, requires one of {sorted(required)}",
        extra={"user_id": user.id},
    )
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=INSUFFICIENT_PERMISSIONS)


def require_roles(*required: str):
    """
    Usage:
      Depends(require_roles("admin"))
      Depends(require_roles("admin", "hr_manager"))  # any-of
    """
    required_set = set(required)

    def _dep(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not user.has_any_role(required_set):
            raise _forbidden(user, required_set)
        return user

    return _dep


def require_permissions(*required: str):
    """Same as require_roles, matched against the token's permission claims."""
    required_set = set(required)

    def _dep(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not user.has_any_permission(required_set):
            raise _forbidden(user, required_set)
        return user

    return _dep
