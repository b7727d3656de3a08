"""Schemas for admin user management."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.core.security import USERNAME_MAX_LEN, USERNAME_MIN_LEN


class UserCreate(BaseModel):
    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    # Length is checked by the service so the caller gets the weak-password message.
    password: str = Field(..., max_length=1024)
    enabled: bool = True
    role: str = "user"


class UserUpdate(BaseModel):
    """PUT /admin/users/{id}: fields left out keep their current value; password only when given."""

    username: str | None = Field(
        default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN
    )
    password: str | None = Field(default=None, max_length=1024)
    enabled: bool | None = None
    must_change_password: bool | None = None
    role: str | None = None
    global_radios_enabled: bool | None = None

    @model_validator(mode="after")
    def check_required_not_null(self) -> "UserUpdate":
        for field in ("username", "enabled", "must_change_password", "role", "global_radios_enabled"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class UserItem(BaseModel):
    """User entry for admin list (no password, no lockout internals)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    enabled: bool
    must_change_password: bool
    role: str
    global_radios_enabled: bool
