"""Request/response schemas for auth and per-user settings endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from app.models.user import ROLE_ADMIN


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=1024, description="Password")


class TokenResponse(BaseModel):
    """JWT returned after successful login, in the shape the dashboard reads."""

    token: str = Field(..., description="JWT access token (send as Bearer)")
    must_change_password: bool = Field(..., serialization_alias="mustChangePassword")
    role: str


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_password: str = Field(..., alias="newPassword", max_length=1024)


class CurrentUser(BaseModel):
    """Authenticated user for dependency injection; role and settings come from the DB, not the token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    must_change_password: bool
    global_radios_enabled: bool

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class UserSettings(BaseModel):
    global_radios_enabled: bool


class UserSettingsUpdate(BaseModel):
    """PATCH /admin/settings body; non-boolean values are rejected."""

    global_radios_enabled: StrictBool


class SettingsUpdatedResponse(BaseModel):
    message: str
    global_radios_enabled: bool


class MessageResponse(BaseModel):
    message: str
