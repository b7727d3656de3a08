"""Which stations a requester may see, and how each row's owner is labelled."""

from typing import Protocol

from sqlalchemy.orm import Session, joinedload

from app.models import RadioStation
from app.models.user import ROLE_ADMIN

OWNER_GLOBAL = "Global"
OWNER_UNKNOWN = "Unknown"


class Requester(Protocol):
    """Anything with the identity fields the resolver reads (ORM User or CurrentUser)."""

    id: int
    role: str
    global_radios_enabled: bool


def owner_label(station: RadioStation) -> str:
    """'Global' for global stations, else the owner's username, else 'Unknown'."""
    if station.is_global:
        return OWNER_GLOBAL
    if station.user_id is not None and station.owner is not None:
        return station.owner.username
    return OWNER_UNKNOWN


def visible_stations(db: Session, requester: Requester) -> list[RadioStation]:
    """
    Stations shown to requester in the client.

    With global_radios_enabled every enabled station is returned, whoever owns
    it. Without it only the requester's own enabled, non-global stations.
    """
    query = (
        db.query(RadioStation)
        .options(joinedload(RadioStation.owner))
        .filter(RadioStation.enabled.is_(True))
    )
    if not requester.global_radios_enabled:
        query = query.filter(
            RadioStation.user_id == requester.id,
            RadioStation.is_global.is_(False),
        )
    return query.order_by(RadioStation.id).all()


def admin_listing(db: Session, requester: Requester) -> list[RadioStation]:
    """Rows for the management table: everything for admins, own non-global rows otherwise."""
    query = db.query(RadioStation).options(joinedload(RadioStation.owner))
    if requester.role != ROLE_ADMIN:
        query = query.filter(
            RadioStation.user_id == requester.id,
            RadioStation.is_global.is_(False),
        )
    return query.order_by(RadioStation.id).all()
