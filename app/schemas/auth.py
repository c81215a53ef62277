from pydantic import BaseModel, Field


class CurrentUser(BaseModel):
    """Caller identity decoded from a bearer token."""

    id: str
    email: str | None = None
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    def has_any_role(self, allowed: set[str]) -> bool:
        return bool(set(self.roles) & allowed)

    def has_any_permission(self, allowed: set[str]) -> bool:
        return bool(set(self.permissions) & allowed)
