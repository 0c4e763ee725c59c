"""
Lyrics lookup results.

A lookup has exactly three outcomes, modeled as a closed union of
frozen dataclasses:

    Found         - synced and/or plain lyrics were returned
    Instrumental  - the service marks the track as having no vocals
    NotFound      - the service has no lyrics for the track

A transport or service failure is not a result at all: the client raises
LyricsLookupError instead.

Usage:
    result = client.fetch_lyrics(metadata)
    if isinstance(result, Found):
        ...
    elif isinstance(result, Instrumental):
        ...
    else:  # NotFound
        ...
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Found:
    """
    Lyrics returned by the service.

    At least one of synced / plain is set.

    Attributes:
        synced: LRC text with [mm:ss.xx] line timestamps.
        plain: Plain lyrics text.
        track_name: Title of the matched record.
        artist_name: Artist of the matched record.
        album_name: Album of the matched record.
        duration: Duration of the matched record in seconds.
        source: Lookup strategy that matched ("get" or "search").
    """

    synced: str | None = None
    plain: str | None = None
    track_name: str | None = None
    artist_name: str | None = None
    album_name: str | None = None
    duration: float | None = None
    source: str = "get"

    @property
    def is_synced(self) -> bool:
        return self.synced is not None


@dataclass(frozen=True)
class Instrumental:
    """The track has no vocals, so there are no lyrics to write."""


@dataclass(frozen=True)
class NotFound:
    """The service has no lyrics for the track."""


LyricsResult = Union[Found, Instrumental, NotFound]
