"""
Local music library access.

    - models: AudioFile, AudioFormat, TrackMetadata
    - scanner: scan_library() walks a file or directory for audio files
    - metadata: read_track_metadata() reads lookup tags with mutagen
"""

from lrcphile.library.metadata import read_track_metadata
from lrcphile.library.models import AudioFile, AudioFormat, TrackMetadata
from lrcphile.library.scanner import scan_library

__all__ = [
    "AudioFile",
    "AudioFormat",
    "TrackMetadata",
    "read_track_metadata",
    "scan_library",
]
