"""Station listings for the in-game client and the public now-playing lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.models import User
from app.schemas.auth import CurrentUser
from app.schemas.radio import RadioItem, SongResponse, UserRadioItem
from app.services.now_playing import find_enabled_station, get_current_song
from app.services.visibility import owner_label, visible_stations

router = APIRouter()

# Shown in the per-user listing; the client asks /radio?url= for the live title.
SONG_PLACEHOLDER = "Coming SOON!"


@router.get("/radios", response_model=list[RadioItem])
def list_visible_radios(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[RadioItem]:
    """Stations the caller sees in the select box, honouring their global-radios setting."""
    return [
        RadioItem(
            name=s.name,
            url=s.stream_url,
            api=s.now_playing_api,
            owner=owner_label(s),
        )
        for s in visible_stations(db, current_user)
    ]


@router.get("/radio", response_model=SongResponse)
async def get_song(
    url: Annotated[str, Query(min_length=1)],
    db: Annotated[Session, Depends(get_db)],
) -> SongResponse:
    """Current track for the enabled station streaming at url (404 if none)."""
    # Sync ORM lookup off the event loop; only the upstream fetch is awaited here.
    station = await run_in_threadpool(find_enabled_station, db, url)
    song = await get_current_song(station.name, station.now_playing_api)
    return SongResponse(song=song)


@router.get("/radio/{username}", response_model=list[UserRadioItem])
def list_user_radios(
    username: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRadioItem]:
    """Public listing of what the named (enabled) user would see in the client."""
    user = (
        db.query(User)
        .filter(User.username == username, User.enabled.is_(True))
        .first()
    )
    if user is None:
        raise NotFoundError("User not found or disabled")
    return [
        UserRadioItem(
            name=s.name,
            url=s.stream_url,
            song=SONG_PLACEHOLDER,
            owner=owner_label(s),
        )
        for s in visible_stations(db, user)
    ]
