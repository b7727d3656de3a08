"""Pydantic request/response schemas."""

from app.schemas.auth import (
    ChangePasswordRequest,
    CurrentUser,
    LoginRequest,
    MessageResponse,
    SettingsUpdatedResponse,
    TokenResponse,
    UserSettings,
    UserSettingsUpdate,
)
from app.schemas.health import HealthResponse
from app.schemas.radio import (
    AdminRadioItem,
    RadioCreate,
    RadioItem,
    RadioUpdate,
    SongResponse,
    UserRadioItem,
)
from app.schemas.user import UserCreate, UserItem, UserUpdate

__all__ = [
    "AdminRadioItem",
    "ChangePasswordRequest",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RadioCreate",
    "RadioItem",
    "RadioUpdate",
    "SettingsUpdatedResponse",
    "SongResponse",
    "TokenResponse",
    "UserCreate",
    "UserItem",
    "UserRadioItem",
    "UserSettings",
    "UserSettingsUpdate",
    "UserUpdate",
]
