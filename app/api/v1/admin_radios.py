"""Station management for the admin dashboard (own stations for users, everything for admins)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.radio import AdminRadioItem, RadioCreate, RadioUpdate
from app.services import radios as radio_service
from app.services.visibility import admin_listing

router = APIRouter()


@router.get("", response_model=list[AdminRadioItem])
def list_radios(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[AdminRadioItem]:
    return [radio_service.to_admin_item(s) for s in admin_listing(db, current_user)]


@router.post("", response_model=AdminRadioItem, status_code=status.HTTP_201_CREATED)
def create_radio(
    body: RadioCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> AdminRadioItem:
    """Create a station. is_global is ignored (forced false) for non-admins."""
    station = radio_service.create_station(db, current_user, body)
    return radio_service.to_admin_item(station)


@router.put("/{radio_id}", response_model=AdminRadioItem)
def update_radio(
    radio_id: int,
    body: RadioUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> AdminRadioItem:
    station = radio_service.update_station(db, current_user, radio_id, body)
    return radio_service.to_admin_item(station)


@router.delete("/{radio_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_radio(
    radio_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    radio_service.delete_station(db, current_user, radio_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
