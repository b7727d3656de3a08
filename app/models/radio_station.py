"""ORM model for radio stations served to the in-game select box."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class RadioStation(Base):
    """
    A stream the client can tune into.

    A station is either global (is_global, user_id NULL) or owned by exactly one
    user. user_id becomes NULL when the owner is deleted.
    """

    __tablename__ = "radio_stations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    stream_url = Column(String(2048), nullable=False, unique=True, index=True)
    now_playing_api = Column(String(2048), nullable=True)
    enabled = Column(Boolean, nullable=False, default=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_global = Column(Boolean, nullable=False, default=False)

    owner = relationship("User", back_populates="radio_stations")
