"""ORM model for application users (auth, lockout and per-user settings)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. failed_attempts and lockout_until back the
    per-account lockout; global_radios_enabled is the user's display preference
    for seeing stations beyond their own.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER)
    must_change_password = Column(Boolean, nullable=False, default=True)
    enabled = Column(Boolean, nullable=False, default=True)
    failed_attempts = Column(Integer, nullable=False, default=0)
    lockout_until = Column(DateTime(timezone=True), nullable=True)
    global_radios_enabled = Column(Boolean, nullable=False, default=True)

    # No delete cascade: removing a user nulls user_id on their stations.
    radio_stations = relationship("RadioStation", back_populates="owner")

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
