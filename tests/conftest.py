"""Test configuration and fixtures"""

import pytest
import tempfile
from pathlib import Path

from lrcphile.library.models import AudioFile, AudioFormat, TrackMetadata


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def make_audio_file(temp_dir):
    """Factory creating an (empty) audio file in temp_dir"""
    def _make(name: str = "Song.mp3") -> AudioFile:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
        return AudioFile(path=path, extension=AudioFormat.from_path(path))
    return _make


@pytest.fixture
def sample_metadata():
    """Fully tagged track"""
    return TrackMetadata(
        title="Test Song",
        artist="Test Artist",
        album="Test Album",
        duration_seconds=210,
    )


@pytest.fixture
def sample_record():
    """LRCLIB record with synced and plain lyrics"""
    return {
        "id": 3396226,
        "trackName": "Test Song",
        "artistName": "Test Artist",
        "albumName": "Test Album",
        "duration": 210.0,
        "instrumental": False,
        "plainLyrics": "First line\nSecond line",
        "syncedLyrics": "[00:12.34] First line\n[00:15.67] Second line",
    }
