"""
LRCLIB client for lrcphile.

Looks up lyrics for a track on an LRCLIB-compatible service
(https://lrclib.net by default, or a self-hosted instance).

Lookup Strategy:
    1. GET /api/get with track, artist, album and duration. The service
       matches the duration within a couple of seconds and answers 404
       when it has no such track.
    2. If that yields nothing, GET /api/search with track and artist only.
       The first plausible candidate (instrumental, or carrying lyrics)
       is taken as-is; the service's own ordering is authoritative.

Each strategy is attempted exactly once. Results are not cached.

Error Handling:
    Anything that prevents a trustworthy answer (connection error, timeout,
    unexpected HTTP status, malformed JSON) raises LyricsLookupError.
    A legitimate "no lyrics" answer is returned as NotFound, never raised.

Usage:
    from lrcphile.lyrics.client import LrclibClient

    with LrclibClient("https://lrclib.net", timeout=15) as client:
        result = client.fetch_lyrics(metadata)
"""

from typing import Any

import requests

from lrcphile.core.config import DEFAULT_LYRICS_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from lrcphile.core.exceptions import LyricsLookupError
from lrcphile.core.logger import get_logger
from lrcphile.library.models import TrackMetadata
from lrcphile.lyrics.models import Found, Instrumental, LyricsResult, NotFound

logger = get_logger(__name__)


GET_ENDPOINT = "/api/get"
SEARCH_ENDPOINT = "/api/search"

# Some records mark instrumentals only through this synced-lyrics placeholder
INSTRUMENTAL_PLACEHOLDER = "[au: instrumental]"


class LrclibClient:
    """
    Client for the LRCLIB HTTP API.

    Attributes:
        base_url: Service base URL without trailing slash.
        timeout: Per-request timeout in seconds.
        session: requests.Session carrying the User-Agent header.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_LYRICS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def __enter__(self) -> "LrclibClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def fetch_lyrics(self, metadata: TrackMetadata) -> LyricsResult:
        """
        Look up lyrics for a track.

        Args:
            metadata: Tags of the track to look up.

        Returns:
            Found, Instrumental or NotFound.

        Raises:
            LyricsLookupError: If either request fails or returns an
                               unusable response.
        """
        record = self.get_by_metadata(metadata)
        if record is not None:
            result = _to_result(record, source="get")
            if not isinstance(result, NotFound):
                logger.debug(f"Exact match for {metadata.description}")
                return result

        logger.debug(f"No exact match for {metadata.description}, searching")
        for candidate in self.search(metadata):
            result = _to_result(candidate, source="search")
            if not isinstance(result, NotFound):
                return result

        return NotFound()

    def get_by_metadata(self, metadata: TrackMetadata) -> dict[str, Any] | None:
        """
        Exact lookup: GET /api/get.

        Returns:
            The matched record, or None if the service answered 404.

        Raises:
            LyricsLookupError: On transport errors, other non-2xx statuses,
                               or a body that is not a JSON object.
        """
        params: dict[str, Any] = {
            "track_name": metadata.title,
            "artist_name": metadata.artist,
        }
        if metadata.album:
            params["album_name"] = metadata.album
        if metadata.duration_seconds:
            params["duration"] = metadata.duration_seconds

        response = self._request(GET_ENDPOINT, params)
        if response.status_code == 404:
            return None
        data = self._parse_json(response)
        if not isinstance(data, dict):
            raise LyricsLookupError(
                "Unexpected response from lyrics service: expected a JSON object",
                details={"url": response.url}
            )
        return data

    def search(self, metadata: TrackMetadata) -> list[dict[str, Any]]:
        """
        Broad lookup: GET /api/search by title and artist.

        Returns:
            Candidate records in the order the service returned them.

        Raises:
            LyricsLookupError: On transport errors, any non-2xx status,
                               or a body that is not a JSON array.
        """
        params = {
            "track_name": metadata.title,
            "artist_name": metadata.artist,
        }
        response = self._request(SEARCH_ENDPOINT, params)
        data = self._parse_json(response)
        if not isinstance(data, list):
            raise LyricsLookupError(
                "Unexpected response from lyrics service: expected a JSON array",
                details={"url": response.url}
            )
        return [item for item in data if isinstance(item, dict)]

    def _request(self, endpoint: str, params: dict[str, Any]) -> requests.Response:
        """
        Send one GET request.

        A 404 from the exact lookup endpoint is returned to the caller;
        every other non-2xx status raises.
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise LyricsLookupError(
                f"Lyrics service timed out after {self.timeout:g}s",
                details={"url": url, "original_error": str(e)}
            ) from e
        except requests.RequestException as e:
            raise LyricsLookupError(
                f"Lyrics service request failed: {e}",
                details={"url": url, "original_error": str(e)}
            ) from e

        if response.status_code == 404 and endpoint == GET_ENDPOINT:
            return response
        if not 200 <= response.status_code < 300:
            raise LyricsLookupError(
                f"API request failed with status: {response.status_code}",
                details={"url": response.url},
                status_code=response.status_code
            )
        return response

    def _parse_json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise LyricsLookupError(
                "Malformed JSON in lyrics service response",
                details={"url": response.url, "original_error": str(e)}
            ) from e


def _to_result(record: dict[str, Any], source: str) -> LyricsResult:
    """Interpret one LRCLIB record."""
    synced = _clean(record.get("syncedLyrics"))
    plain = _clean(record.get("plainLyrics"))

    if record.get("instrumental") or synced == INSTRUMENTAL_PLACEHOLDER:
        return Instrumental()
    if synced is None and plain is None:
        return NotFound()

    duration = record.get("duration")
    return Found(
        synced=synced,
        plain=plain,
        track_name=record.get("trackName"),
        artist_name=record.get("artistName"),
        album_name=record.get("albumName"),
        duration=float(duration) if isinstance(duration, (int, float)) else None,
        source=source,
    )


def _clean(value: Any) -> str | None:
    """Strip a lyrics field; non-strings and blank text count as absent."""
    if not isinstance(value, str):
        return None
    return value.strip() or None
