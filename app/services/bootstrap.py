"""First-start provisioning of the default admin account."""

import logging
import secrets
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import User
from app.models.user import ROLE_ADMIN

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def ensure_default_admin(db: Session, settings: "Settings") -> str | None:
    """
    Create the default admin when it does not exist yet.

    Returns the generated temporary password, or None when the account was
    already there. The password is logged once so the operator can sign in.
    """
    username = settings.DEFAULT_ADMIN_USERNAME
    if db.query(User.id).filter(User.username == username).first() is not None:
        return None

    temp_password = secrets.token_hex(8)
    db.add(
        User(
            username=username,
            password_hash=hash_password(temp_password),
            role=ROLE_ADMIN,
            must_change_password=True,
            enabled=True,
            failed_attempts=0,
            global_radios_enabled=True,
        )
    )
    db.commit()
    logger.warning(
        "Default admin account created: username=%s temporary password=%s "
        "(change it at first login)",
        username,
        temp_password,
    )
    return temp_password
