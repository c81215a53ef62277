from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from app.api.errors import register_error_handlers
from app.core.rbac import require_permissions, require_roles
from app.schemas.auth import CurrentUser
from tests.helpers import auth_headers, raw_token_headers


def _gated_app() -> FastAPI:
    router = APIRouter()

    @router.get("/reports")
    def reports(user: CurrentUser = Depends(require_roles("admin", "hr_manager"))):
        return {"user": user.id, "roles": user.roles}

    @router.get("/exports")
    def exports(user: CurrentUser = Depends(require_permissions("forms:export"))):
        return {"user": user.id}

    app = FastAPI()
    register_error_handlers(app)
    app.include_router(router)
    return app


def test_role_gate_forbidden_without_matching_role():
    client = TestClient(_gated_app())
    r = client.get("/reports", headers=auth_headers("user@local.test", ["employee"]))
    assert r.status_code == 403
    assert r.json()["error"] == "Access denied. Insufficient permissions."


def test_role_gate_any_of_match():
    client = TestClient(_gated_app())
    r = client.get("/reports", headers=auth_headers("hr@local.test", ["employee", "hr_manager"]))
    assert r.status_code == 200
    assert r.json() == {"user": "hr@local.test", "roles": ["employee", "hr_manager"]}


def test_role_gate_accepts_single_role_claim():
    client = TestClient(_gated_app())
    r = client.get("/reports", headers=raw_token_headers({"sub": "legacy-7", "role": "admin"}))
    assert r.status_code == 200
    assert r.json()["roles"] == ["admin"]


def test_role_gate_requires_token():
    client = TestClient(_gated_app())
    r = client.get("/reports")
    assert r.status_code == 401


def test_permission_gate():
    client = TestClient(_gated_app())

    denied = client.get("/exports", headers=auth_headers("admin@local.test", ["admin"]))
    assert denied.status_code == 403

    allowed = client.get(
        "/exports",
        headers=auth_headers("analyst@local.test", [], permissions=["forms:read", "forms:export"]),
    )
    assert allowed.status_code == 200
    assert allowed.json() == {"user": "analyst@local.test"}
