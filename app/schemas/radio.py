"""Schemas for radio station listing and management."""

from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, Field, field_validator, model_validator

NAME_MAX_LENGTH = 255
URL_MAX_LENGTH = 2048
ALLOWED_URL_SCHEMES = ("http", "https")


def validate_station_url(value: str) -> str:
    """
    Require an absolute http(s) URL with a host and a valid port.

    The URL must also be one httpx can request, so a stored now-playing
    endpoint never fails before the request is sent (bad IDNA hosts, etc.).
    Returns the stripped value unchanged otherwise.
    """
    v = value.strip()
    if not v or len(v) > URL_MAX_LENGTH:
        raise ValueError("URL must be 1-2048 characters")
    if any(c.isspace() for c in v):
        raise ValueError("URL must not contain whitespace")
    parsed = urlparse(v)
    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.hostname:
        raise ValueError("URL must be an absolute http or https URL")
    try:
        parsed.port  # raises ValueError outside 0..65535 or when not numeric
        httpx.URL(v)
    except (ValueError, httpx.InvalidURL) as e:
        raise ValueError(f"URL is malformed: {e}") from e
    return v


def _normalize_optional_url(value: str | None) -> str | None:
    # The dashboard sends "" for "no now-playing endpoint".
    if value is None or not value.strip():
        return None
    return validate_station_url(value)


class RadioCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    stream_url: str
    now_playing_api: str | None = None
    enabled: bool = True
    is_global: bool = False

    @field_validator("stream_url")
    @classmethod
    def check_stream_url(cls, v: str) -> str:
        return validate_station_url(v)

    @field_validator("now_playing_api")
    @classmethod
    def check_now_playing_api(cls, v: str | None) -> str | None:
        return _normalize_optional_url(v)


class RadioUpdate(BaseModel):
    """PUT /admin/radios/{id}: fields left out keep their current value."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    stream_url: str | None = None
    now_playing_api: str | None = None
    enabled: bool | None = None
    is_global: bool | None = None

    @field_validator("stream_url")
    @classmethod
    def check_stream_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return validate_station_url(v)

    @field_validator("now_playing_api")
    @classmethod
    def check_now_playing_api(cls, v: str | None) -> str | None:
        return _normalize_optional_url(v)

    @model_validator(mode="after")
    def check_required_not_null(self) -> "RadioUpdate":
        for field in ("name", "stream_url", "enabled", "is_global"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class AdminRadioItem(BaseModel):
    """Row of the admin listing; also returned from create/update."""

    id: int
    name: str
    stream_url: str
    now_playing_api: str | None
    enabled: bool
    owner: str
    user_id: int | None
    is_global: bool


class RadioItem(BaseModel):
    """Station as seen by the in-game select box (GET /radios)."""

    name: str
    url: str
    api: str | None
    owner: str


class UserRadioItem(BaseModel):
    """Station in the public per-user listing (GET /radio/{username})."""

    name: str
    url: str
    song: str
    owner: str


class SongResponse(BaseModel):
    song: str
