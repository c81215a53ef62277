from fastapi import APIRouter, Depends, status

from app.api.errors import GuardedRoute
from app.core.rbac import require_roles
from app.core.security import get_current_user
from app.schemas.auth import CurrentUser
from app.schemas.forms import (
    ErrorOut,
    FormDeleteOut,
    FormListOut,
    FormOut,
    FormResponseListOut,
    FormResponseOut,
)

FORM_MANAGER_ROLES = ("admin", "hr_manager")

# Every route authenticates first; role-gated routes add require_roles on top.
router = APIRouter(
    prefix="/forms",
    tags=["forms"],
    dependencies=[Depends(get_current_user)],
    route_class=GuardedRoute,
    responses={500: {"model": ErrorOut}},
)


# Request bodies are not read until Form and Form Response have a schema.
def _pending(action: str) -> str:
    return f"{action} - Not yet implemented"


@router.get("", response_model=FormListOut)
def get_forms():
    return FormListOut(message=_pending("Get all forms"), forms=[])


# Registered ahead of /{form_id} so the literal "responses" segment is never
# read as a form id.
@router.get("/responses/{response_id}", response_model=FormResponseOut)
def get_form_response_by_id(response_id: str):
    return FormResponseOut(message=_pending(f"Get form response {response_id}"), response=None)


@router.get("/{form_id}", response_model=FormOut)
def get_form_by_id(form_id: str):
    return FormOut(message=_pending(f"Get form {form_id}"), form=None)


@router.post("", response_model=FormOut, status_code=status.HTTP_201_CREATED)
def create_form(
    _: CurrentUser = Depends(require_roles(*FORM_MANAGER_ROLES)),
):
    return FormOut(message=_pending("Create form"), form=None)


@router.put("/{form_id}", response_model=FormOut)
def update_form(
    form_id: str,
    _: CurrentUser = Depends(require_roles(*FORM_MANAGER_ROLES)),
):
    return FormOut(message=_pending(f"Update form {form_id}"), form=None)


@router.delete("/{form_id}", response_model=FormDeleteOut)
def delete_form(
    form_id: str,
    _: CurrentUser = Depends(require_roles(*FORM_MANAGER_ROLES)),
):
    return FormDeleteOut(message=_pending(f"Delete form {form_id}"))


# TODO: decide whether submission should be limited to the form's intended
# audience once forms carry an audience field.
@router.post("/{form_id}/submit", response_model=FormResponseOut, status_code=status.HTTP_201_CREATED)
def submit_form_response(form_id: str):
    return FormResponseOut(message=_pending(f"Submit form response for form {form_id}"), response=None)


@router.get("/{form_id}/responses", response_model=FormResponseListOut)
def get_form_responses(
    form_id: str,
    _: CurrentUser = Depends(require_roles(*FORM_MANAGER_ROLES)),
):
    return FormResponseListOut(message=_pending(f"Get responses for form {form_id}"), responses=[])
