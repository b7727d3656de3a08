"""Unit tests for app.services.now_playing with mocked httpx."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from app.services.now_playing import UNKNOWN_SONG, get_current_song

API = "http://meta.example/now"


def _mock_client(mock_client_class: MagicMock, get: AsyncMock) -> None:
    mock_instance = MagicMock()
    mock_instance.get = get
    mock_client_class.return_value.__aenter__ = AsyncMock(return_value=mock_instance)
    mock_client_class.return_value.__aexit__ = AsyncMock(return_value=None)


def _response(body: object) -> MagicMock:
    resp = MagicMock()
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.return_value = body
    return resp


class TestGetCurrentSong(unittest.TestCase):
    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_no_endpoint_uses_fallback_without_fetching(self, mock_client_class: MagicMock) -> None:
        song = asyncio.run(get_current_song("Jazz FM", None))
        self.assertEqual(song, "Now Playing on Jazz FM")
        mock_client_class.assert_not_called()

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_returns_song_field(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response({"song": "Artist - Title"}))
        _mock_client(mock_client_class, get)
        song = asyncio.run(get_current_song("Jazz FM", API))
        self.assertEqual(song, "Artist - Title")
        get.assert_awaited_once_with(API)

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_missing_song_field(self, mock_client_class: MagicMock) -> None:
        _mock_client(mock_client_class, AsyncMock(return_value=_response({"title": "x"})))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), UNKNOWN_SONG)

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_transport_error_falls_back(self, mock_client_class: MagicMock) -> None:
        _mock_client(mock_client_class, AsyncMock(side_effect=httpx.ConnectError("refused")))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), "Now Playing on Jazz FM")

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_invalid_url_falls_back(self, mock_client_class: MagicMock) -> None:
        _mock_client(mock_client_class, AsyncMock(side_effect=httpx.InvalidURL("Invalid IDNA hostname")))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), "Now Playing on Jazz FM")

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_http_error_status_falls_back(self, mock_client_class: MagicMock) -> None:
        resp = _response({"song": "ignored"})
        resp.status_code = 502
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            "bad gateway", request=MagicMock(), response=MagicMock()
        )
        _mock_client(mock_client_class, AsyncMock(return_value=resp))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), "Now Playing on Jazz FM")

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_non_json_body_falls_back(self, mock_client_class: MagicMock) -> None:
        resp = _response(None)
        resp.json.side_effect = ValueError("not json")
        _mock_client(mock_client_class, AsyncMock(return_value=resp))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), "Now Playing on Jazz FM")

    @patch("app.services.now_playing.httpx.AsyncClient")
    def test_non_object_body_falls_back(self, mock_client_class: MagicMock) -> None:
        _mock_client(mock_client_class, AsyncMock(return_value=_response(["a", "b"])))
        self.assertEqual(asyncio.run(get_current_song("Jazz FM", API)), "Now Playing on Jazz FM")


if __name__ == "__main__":
    unittest.main()
