"""JWT login, password change, per-user settings and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from app.core.security import decode_access_token
from app.models import User
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
from app.services import auth as auth_service
from app.services.rate_limit import LoginRateLimiter

router = APIRouter()
security = HTTPBearer(auto_error=False)

login_rate_limiter = LoginRateLimiter(
    max_attempts=settings.LOGIN_RATE_LIMIT_ATTEMPTS,
    window_sec=settings.LOGIN_RATE_LIMIT_WINDOW_SEC,
)


def client_address(request: Request) -> str:
    """
    Caller address used as the rate-limit key.

    Behind one trusted reverse proxy the rightmost X-Forwarded-For entry is the
    address that proxy saw; everything left of it is client-supplied.
    """
    if get_settings().TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for", "")
        last_hop = forwarded.split(",")[-1].strip()
        if last_hop:
            return last_hop
    if request.client is None:
        return "unknown"
    return request.client.host


def enforce_login_rate_limit(request: Request) -> None:
    """Dependency: count this login attempt against the caller's window."""
    login_rate_limiter.hit(client_address(request))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the current user.

    401 if the token is missing or invalid. 403 if the account no longer exists,
    is disabled or is locked out; tokens are stateless, so these are re-checked
    on every request. Role and settings are read from the DB, not the token.
    """
    if credentials is None:
        raise AuthenticationError("Token required")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid token")
    username = payload.get("username")
    if not username or not isinstance(username, str):
        raise AuthenticationError("Invalid token")

    user = db.query(User).filter(User.username == username).first()
    if user is None or not user.enabled or auth_service.is_locked_out(user):
        raise AuthorizationError("Access denied")
    return CurrentUser.model_validate(user)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise AuthorizationError("Admin access required")
    return current_user


def _load_user(db: Session, current_user: CurrentUser) -> User:
    user = db.get(User, current_user.id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.post(
    "/login",
    response_model=TokenResponse,
    dependencies=[Depends(enforce_login_rate_limit)],
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.login(db, body.username, body.password, get_settings())


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Change the caller's own password and clear the must-change flag."""
    user = _load_user(db, current_user)
    auth_service.change_password(db, user, body.new_password)
    return MessageResponse(message="Password changed successfully")


@router.get("/settings", response_model=UserSettings)
def get_user_settings(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserSettings:
    user = _load_user(db, current_user)
    return UserSettings(global_radios_enabled=user.global_radios_enabled)


@router.patch("/settings", response_model=SettingsUpdatedResponse)
def update_user_settings(
    body: UserSettingsUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> SettingsUpdatedResponse:
    """Toggle whether the caller sees global and other users' stations."""
    user = _load_user(db, current_user)
    user.global_radios_enabled = body.global_radios_enabled
    db.commit()
    return SettingsUpdatedResponse(
        message="Settings updated successfully",
        global_radios_enabled=user.global_radios_enabled,
    )
