"""
Metadata extraction for lrcphile.

Reads the tags a lyrics lookup needs (title, artist, album, duration)
from an audio file with mutagen.

Tag Lookup:
    mutagen's "easy" interface gives lowercase keys (title, artist, album)
    for MP3, MP4/M4A and the Vorbis-comment formats. WAV, DSF and DFF carry
    ID3 frames, WMA carries ASF attributes and APE carries APEv2 items,
    so the native keys of those containers are tried after the easy key.

Usage:
    from lrcphile.library.metadata import read_track_metadata

    try:
        metadata = read_track_metadata(audio_file)
    except MetadataError as e:
        logger.error(e.message)
"""

from typing import Any

from mutagen import File as MutagenFile
from mutagen import MutagenError

from lrcphile.core.exceptions import MetadataError
from lrcphile.core.logger import get_logger
from lrcphile.library.models import AudioFile, TrackMetadata

logger = get_logger(__name__)


# Candidate tag keys per field, easy key first
TITLE_KEYS = ("title", "TIT2", "Title")
ARTIST_KEYS = ("artist", "TPE1", "Author", "Artist")
ALBUM_KEYS = ("album", "TALB", "WM/AlbumTitle", "Album")


def read_track_metadata(audio_file: AudioFile) -> TrackMetadata:
    """
    Read lookup metadata from an audio file.

    Args:
        audio_file: The file to read.

    Returns:
        TrackMetadata with title and artist set; album and duration are
        None when not available.

    Raises:
        MetadataError: If the file cannot be opened or parsed, or if the
                       title or artist tag is missing or blank.
    """
    path = audio_file.path
    try:
        audio = MutagenFile(str(path), easy=True)
    except (MutagenError, OSError) as e:
        raise MetadataError(
            f"Cannot read audio file: {e}",
            details={"file_path": str(path), "original_error": str(e)}
        ) from e

    if audio is None:
        raise MetadataError(
            "Unrecognized audio file",
            details={"file_path": str(path)}
        )

    tags = audio.tags
    if not tags:
        raise MetadataError("No tags found", details={"file_path": str(path)})

    title = _first_tag(tags, TITLE_KEYS)
    artist = _first_tag(tags, ARTIST_KEYS)
    missing = [name for name, value in (("title", title), ("artist", artist)) if not value]
    if missing:
        raise MetadataError(
            f"Missing required metadata ({', '.join(missing)})",
            details={"file_path": str(path), "missing": missing}
        )

    metadata = TrackMetadata(
        title=title,
        artist=artist,
        album=_first_tag(tags, ALBUM_KEYS),
        duration_seconds=_duration_seconds(audio),
    )
    logger.debug(f"Read metadata from {path.name}: {metadata}")
    return metadata


def _first_tag(tags: Any, keys: tuple[str, ...]) -> str | None:
    """Return the first non-blank text value found under any of the keys."""
    for key in keys:
        try:
            value = tags.get(key)
        except (KeyError, ValueError):
            # EasyID3/EasyMP4 reject keys they have no mapping for
            continue
        text = _as_text(value)
        if text:
            return text
    return None


def _as_text(value: Any) -> str | None:
    """
    Normalize a tag value to a stripped string.

    Handles lists (easy tags, Vorbis comments, ASF), ID3 frames (.text)
    and APEv2 values (str()).
    """
    if value is None:
        return None
    if hasattr(value, "text"):
        value = value.text
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    text = str(value).strip()
    return text or None


def _duration_seconds(audio: Any) -> int | None:
    info = getattr(audio, "info", None)
    length = getattr(info, "length", None)
    if not length or length <= 0:
        return None
    return int(round(length))
