"""Credential checks, per-account lockout and password changes."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.core.errors import (
    AccountDisabledError,
    AccountLockedError,
    InvalidCredentialsError,
    WeakPasswordError,
)
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    burn_password_check,
    create_access_token,
    hash_password,
    verify_password,
)
from app.models import User
from app.schemas.auth import TokenResponse

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps (SQLite drops tzinfo on DateTime(timezone=True))."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def is_locked_out(user: User, now: datetime | None = None) -> bool:
    """True while lockout_until lies in the future."""
    until = as_utc(user.lockout_until)
    if until is None:
        return False
    return until > (now or datetime.now(UTC))


def validate_new_password(password: str) -> None:
    """Raise WeakPasswordError unless PASSWORD_MIN_LEN <= len <= PASSWORD_MAX_LEN."""
    if len(password) < PASSWORD_MIN_LEN:
        raise WeakPasswordError()
    if len(password) > PASSWORD_MAX_LEN:
        raise WeakPasswordError(f"Password must be at most {PASSWORD_MAX_LEN} characters")


def _register_failure(db: Session, user: User, settings: "Settings", now: datetime) -> None:
    user.failed_attempts = (user.failed_attempts or 0) + 1
    if user.failed_attempts >= settings.MAX_FAILED_LOGIN_ATTEMPTS:
        user.lockout_until = now + timedelta(minutes=settings.LOCKOUT_MINUTES)
        logger.warning(
            "Account locked after repeated failed logins",
            extra={
                "username": user.username,
                "failed_attempts": user.failed_attempts,
                "lockout_minutes": settings.LOCKOUT_MINUTES,
            },
        )
    db.commit()


def login(
    db: Session,
    username: str,
    password: str,
    settings: "Settings",
    now: datetime | None = None,
) -> TokenResponse:
    """
    Verify credentials and issue a session token.

    Check order: unknown user -> InvalidCredentialsError; active lockout ->
    AccountLockedError; disabled -> AccountDisabledError; wrong password ->
    count the failure (locking the account once the cumulative count reaches
    MAX_FAILED_LOGIN_ATTEMPTS) and raise InvalidCredentialsError. Success
    clears the failure counter and the lockout.
    """
    now = now or datetime.now(UTC)
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        burn_password_check(password)
        logger.info("Login failed: unknown user", extra={"username": username})
        raise InvalidCredentialsError()
    if is_locked_out(user, now):
        raise AccountLockedError()
    if not user.enabled:
        raise AccountDisabledError()
    if not verify_password(password, user.password_hash):
        _register_failure(db, user, settings, now)
        logger.info(
            "Login failed: wrong password",
            extra={"username": username, "failed_attempts": user.failed_attempts},
        )
        raise InvalidCredentialsError()

    user.failed_attempts = 0
    user.lockout_until = None
    db.commit()

    token = create_access_token(
        user_id=user.id,
        username=user.username,
        role=user.role,
        must_change_password=user.must_change_password,
    )
    return TokenResponse(
        token=token,
        must_change_password=user.must_change_password,
        role=user.role,
    )


def change_password(db: Session, user: User, new_password: str) -> None:
    """Rehash the user's password and clear must_change_password."""
    validate_new_password(new_password)
    user.password_hash = hash_password(new_password)
    user.must_change_password = False
    db.commit()
    logger.info("Password changed", extra={"username": user.username})
