"""Now-playing lookup for a station's external metadata endpoint."""

import logging

import httpx
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.models import RadioStation

logger = logging.getLogger(__name__)

UNKNOWN_SONG = "Unknown Song"


def fallback_song(station_name: str) -> str:
    return f"Now Playing on {station_name}"


def find_enabled_station(db: Session, stream_url: str) -> RadioStation:
    station = (
        db.query(RadioStation)
        .filter(RadioStation.stream_url == stream_url, RadioStation.enabled.is_(True))
        .first()
    )
    if station is None:
        raise NotFoundError("Radio not found or disabled")
    return station


async def get_current_song(name: str, now_playing_api: str | None) -> str:
    """
    Return the current track title for a station.

    The endpoint is expected to answer with a JSON object carrying a "song"
    field. Unrequestable URLs, transport errors, non-2xx statuses and non-object
    bodies fall back to "Now Playing on {name}"; a missing "song" gives
    "Unknown Song". Never raises.
    No retry, and the transport's default timeout applies.
    """
    if not now_playing_api:
        return fallback_song(name)

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(now_playing_api)
        response.raise_for_status()
        body = response.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.warning(
            "Now-playing fetch failed",
            extra={"api": now_playing_api, "station": name, "reason": str(e)[:200]},
        )
        return fallback_song(name)

    if not isinstance(body, dict):
        logger.warning(
            "Now-playing response is not a JSON object",
            extra={"api": now_playing_api, "station": name},
        )
        return fallback_song(name)

    song = body.get("song")
    if song is None or (isinstance(song, str) and not song.strip()):
        return UNKNOWN_SONG
    return str(song)
