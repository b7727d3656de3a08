"""Station create/update/delete with ownership and global-flag rules."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.models import RadioStation
from app.schemas.auth import CurrentUser
from app.schemas.radio import AdminRadioItem, RadioCreate, RadioUpdate
from app.services.visibility import owner_label

logger = logging.getLogger(__name__)

DUPLICATE_OR_INVALID = "Invalid data or duplicate stream URL"


def to_admin_item(station: RadioStation) -> AdminRadioItem:
    return AdminRadioItem(
        id=station.id,
        name=station.name,
        stream_url=station.stream_url,
        now_playing_api=station.now_playing_api,
        enabled=station.enabled,
        owner=owner_label(station),
        user_id=station.user_id,
        is_global=station.is_global,
    )


def _ensure_stream_url_free(db: Session, stream_url: str, exclude_id: int | None = None) -> None:
    query = db.query(RadioStation.id).filter(RadioStation.stream_url == stream_url)
    if exclude_id is not None:
        query = query.filter(RadioStation.id != exclude_id)
    if query.first() is not None:
        raise ValidationError(DUPLICATE_OR_INVALID)


def _commit(db: Session) -> None:
    # The unique index still catches a concurrent insert of the same stream URL.
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(DUPLICATE_OR_INVALID) from e


def get_station(db: Session, station_id: int) -> RadioStation:
    station = db.get(RadioStation, station_id)
    if station is None:
        raise NotFoundError("Radio not found")
    return station


def _check_can_manage(station: RadioStation, user: CurrentUser, action: str) -> None:
    if user.is_admin:
        return
    if station.user_id != user.id or station.is_global:
        raise AuthorizationError(f"Unauthorized to {action} this radio")


def create_station(db: Session, user: CurrentUser, data: RadioCreate) -> RadioStation:
    """
    Create a station. Non-admins always get is_global=False; non-global
    stations are owned by the caller.
    """
    is_global = data.is_global if user.is_admin else False
    _ensure_stream_url_free(db, data.stream_url)
    station = RadioStation(
        name=data.name,
        stream_url=data.stream_url,
        now_playing_api=data.now_playing_api,
        enabled=data.enabled,
        is_global=is_global,
        user_id=None if is_global else user.id,
    )
    db.add(station)
    _commit(db)
    db.refresh(station)
    logger.info(
        "Radio station created",
        extra={"station_id": station.id, "by": user.username, "is_global": is_global},
    )
    return station


def update_station(
    db: Session, user: CurrentUser, station_id: int, data: RadioUpdate
) -> RadioStation:
    """
    Update a station the caller may manage.

    Only admins change is_global: making a station global clears its owner,
    making it non-global keeps the owner or hands it to the admin.
    """
    station = get_station(db, station_id)
    _check_can_manage(station, user, "edit")

    changes = data.model_dump(exclude_unset=True)
    new_global = changes.pop("is_global", None)
    if "stream_url" in changes:
        _ensure_stream_url_free(db, changes["stream_url"], exclude_id=station.id)
    for field, value in changes.items():
        setattr(station, field, value)

    if user.is_admin and new_global is not None:
        station.is_global = new_global
        station.user_id = None if new_global else (station.user_id or user.id)

    _commit(db)
    db.refresh(station)
    logger.info("Radio station updated", extra={"station_id": station.id, "by": user.username})
    return station


def delete_station(db: Session, user: CurrentUser, station_id: int) -> None:
    station = get_station(db, station_id)
    _check_can_manage(station, user, "delete")
    db.delete(station)
    db.commit()
    logger.info("Radio station deleted", extra={"station_id": station_id, "by": user.username})
