"""
Data models for the local music library.

AudioFile is what the scanner produces; TrackMetadata is what the
metadata reader extracts from it and what the lyrics client queries with.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class AudioFormat(str, Enum):
    """Supported audio file extensions (lowercase, without the dot)."""

    MP3 = "mp3"
    FLAC = "flac"
    WAV = "wav"
    OGG = "ogg"
    M4A = "m4a"
    AAC = "aac"
    OPUS = "opus"
    WMA = "wma"
    APE = "ape"
    DSF = "dsf"
    DFF = "dff"

    @classmethod
    def from_path(cls, path: Path) -> "AudioFormat | None":
        """
        Resolve the format of a path from its suffix, case-insensitively.

        Returns:
            The matching AudioFormat, or None if the suffix is not supported.

        Example:
            AudioFormat.from_path(Path("Song.FLAC"))  # AudioFormat.FLAC
            AudioFormat.from_path(Path("cover.jpg"))  # None
        """
        suffix = path.suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            return None


@dataclass(frozen=True)
class AudioFile:
    """
    A supported audio file found in the library.

    Attributes:
        path: Path to the audio file.
        extension: The file's format.
    """

    path: Path
    extension: AudioFormat

    @property
    def lrc_path(self) -> Path:
        """Sibling path for synced lyrics."""
        return self.path.with_suffix(".lrc")

    @property
    def txt_path(self) -> Path:
        """Sibling path for plain lyrics."""
        return self.path.with_suffix(".txt")


@dataclass(frozen=True)
class TrackMetadata:
    """
    Tags needed to look up a track's lyrics.

    Attributes:
        title: Track title (required).
        artist: Track artist (required).
        album: Album name, if tagged.
        duration_seconds: Length rounded to whole seconds, if known.
    """

    title: str
    artist: str
    album: str | None = None
    duration_seconds: int | None = None

    @property
    def description(self) -> str:
        """Human-readable "Artist - Title" for log messages."""
        return f"{self.artist} - {self.title}"
