from datetime import timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token


def token_for(subject: str = "user@local.test", roles: list[str] | None = None, **kwargs) -> str:
    return create_access_token(subject, roles=roles or [], **kwargs)


def auth_headers(subject: str = "user@local.test", roles: list[str] | None = None, **kwargs) -> dict:
    return {"Authorization": f"Bearer {token_for(subject, roles, **kwargs)}"}


def admin_headers() -> dict:
    return auth_headers("admin@local.test", ["admin"])


def hr_manager_headers() -> dict:
    return auth_headers("hr@local.test", ["hr_manager"])


def employee_headers() -> dict:
    return auth_headers("employee@local.test", ["employee"])


def expired_headers() -> dict:
    return auth_headers("late@local.test", ["admin"], expires_delta=timedelta(minutes=-5))


def raw_token_headers(claims: dict, secret: str | None = None) -> dict:
    token = jwt.encode(claims, secret or settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return {"Authorization": f"Bearer {token}"}
