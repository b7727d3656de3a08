"""Admin-side user management and the protected default admin account."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.security import hash_password
from app.models import User
from app.models.user import ROLES
from app.schemas.auth import CurrentUser
from app.schemas.user import UserCreate, UserUpdate
from app.services.auth import validate_new_password

logger = logging.getLogger(__name__)

DUPLICATE_OR_INVALID = "Invalid data or duplicate username"


def _validate_role(role: str) -> None:
    if role not in ROLES:
        raise ValidationError("Invalid role")


def _ensure_username_free(db: Session, username: str, exclude_id: int | None = None) -> None:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first() is not None:
        raise ValidationError(DUPLICATE_OR_INVALID)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(DUPLICATE_OR_INVALID) from e


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def create_user(db: Session, data: UserCreate) -> User:
    """New accounts must change their password on first login and see global stations."""
    validate_new_password(data.password)
    _validate_role(data.role)
    _ensure_username_free(db, data.username)
    user = User(
        username=data.username,
        password_hash=hash_password(data.password),
        role=data.role,
        must_change_password=True,
        enabled=data.enabled,
        failed_attempts=0,
        global_radios_enabled=True,
    )
    db.add(user)
    _commit(db)
    db.refresh(user)
    logger.info("User created", extra={"username": user.username, "role": user.role})
    return user


def update_user(
    db: Session,
    caller: CurrentUser,
    user_id: int,
    data: UserUpdate,
    default_admin_username: str,
) -> User:
    """Apply the given fields; the default admin can only be changed by itself."""
    user = get_user(db, user_id)
    if user.username == default_admin_username and caller.username != default_admin_username:
        raise AuthorizationError("Cannot modify default admin")

    changes = data.model_dump(exclude_unset=True)
    password = changes.pop("password", None)
    if "role" in changes:
        _validate_role(changes["role"])
    if "username" in changes:
        _ensure_username_free(db, changes["username"], exclude_id=user.id)
    # Empty password means "leave unchanged", as the dashboard's edit form sends it.
    if password:
        validate_new_password(password)
        user.password_hash = hash_password(password)
    for field, value in changes.items():
        setattr(user, field, value)

    _commit(db)
    db.refresh(user)
    logger.info("User updated", extra={"user_id": user.id, "by": caller.username})
    return user


def delete_user(
    db: Session, caller: CurrentUser, user_id: int, default_admin_username: str
) -> None:
    """Delete any account except the default admin. Owned stations lose their owner."""
    user = get_user(db, user_id)
    if user.username == default_admin_username:
        raise AuthorizationError("Cannot delete default admin")
    for station in user.radio_stations:
        station.user_id = None
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id, "by": caller.username})
