import logging
from datetime import datetime, timedelta, timezone

from fastapi import Header, HTTPException, Request, status
from jose import JWTError, jwt

from app.core.config import settings
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


def create_access_token(
    subject: str,
    *,
    roles: list[str] | None = None,
    email: str | None = None,
    permissions: list[str] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    claims: dict = {
        "sub": subject,
        "roles": list(roles or []),
        "iat": now,
        "exp": now + expires_delta,
    }
    if email:
        claims["email"] = email
    if permissions:
        claims["permissions"] = list(permissions)
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def _roles_from_claims(claims: dict) -> list[str]:
    # older tokens carry a single "role" claim instead of a "roles" list
    roles = claims.get("roles")
    if isinstance(roles, list):
        return [str(r) for r in roles]
    role = claims.get("role")
    if isinstance(role, str) and role:
        return [role]
    return []


def decode_access_token(token: str) -> CurrentUser:
    """
    Verify signature and expiry, then map claims onto a CurrentUser.
    Raises JWTError for anything that is not a usable token.
    """
    claims = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    subject = claims.get("sub")
    if not subject:
        raise JWTError("Token has no subject")

    permissions = claims.get("permissions")
    return CurrentUser(
        id=str(subject),
        email=claims.get("email"),
        roles=_roles_from_claims(claims),
        permissions=[str(p) for p in permissions] if isinstance(permissions, list) else [],
    )


def _token_from_header(authorization: str | None) -> str | None:
    # second word of the header, whatever the scheme; a wrong scheme fails verification
    if not authorization:
        return None
    parts = authorization.split()
    return parts[1] if len(parts) > 1 else None


def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> CurrentUser:
    """
    Bearer auth: pass `Authorization: Bearer <jwt>`.
    Mint a dev token with scripts/issue_token.py.
    """
    token = _token_from_header(authorization)
    if not token:
        logger.warning(
            "Missing bearer token",
            extra={"path": request.url.path, "method": request.method},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = decode_access_token(token)
    except JWTError as exc:
        logger.warning(
            f"Rejected bearer token: {exc}",
            extra={"path": request.url.path, "method": request.method},
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token.")

    return user
