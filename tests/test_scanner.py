"""Test library scanning and audio file models"""

import logging
import os
import pytest
from pathlib import Path
from unittest.mock import patch

from lrcphile.core.exceptions import NotFoundError
from lrcphile.library.models import AudioFile, AudioFormat, TrackMetadata
from lrcphile.library.scanner import scan_library


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class TestAudioFormat:
    """Test AudioFormat.from_path()"""

    @pytest.mark.parametrize("name, expected", [
        ("song.mp3", AudioFormat.MP3),
        ("Song.FLAC", AudioFormat.FLAC),
        ("track.Opus", AudioFormat.OPUS),
        ("a.b.dff", AudioFormat.DFF),
    ])
    def test_supported(self, name, expected):
        assert AudioFormat.from_path(Path(name)) is expected

    @pytest.mark.parametrize("name", ["cover.jpg", "notes.txt", "song.lrc", "README", "mp3"])
    def test_unsupported(self, name):
        assert AudioFormat.from_path(Path(name)) is None

    def test_all_formats(self):
        assert {f.value for f in AudioFormat} == {
            "mp3", "flac", "wav", "ogg", "m4a", "aac", "opus", "wma", "ape", "dsf", "dff"
        }


class TestAudioFile:
    """Test AudioFile sibling paths"""

    def test_sibling_paths(self):
        audio_file = AudioFile(path=Path("/music/01 - Song.flac"), extension=AudioFormat.FLAC)
        assert audio_file.lrc_path == Path("/music/01 - Song.lrc")
        assert audio_file.txt_path == Path("/music/01 - Song.txt")

    def test_dotted_stem(self):
        audio_file = AudioFile(path=Path("/music/Mr. Brightside.mp3"), extension=AudioFormat.MP3)
        assert audio_file.lrc_path.name == "Mr. Brightside.lrc"

    def test_description(self):
        metadata = TrackMetadata(title="Song", artist="Artist")
        assert metadata.description == "Artist - Song"


class TestScanLibrary:
    """Test scan_library()"""

    def test_missing_root_raises_immediately(self, temp_dir):
        """NotFoundError is raised by the call, not on iteration"""
        with pytest.raises(NotFoundError):
            scan_library(temp_dir / "missing")

    def test_flat_directory(self, temp_dir):
        _touch(temp_dir / "b.mp3")
        _touch(temp_dir / "a.FLAC")
        _touch(temp_dir / "cover.jpg")
        _touch(temp_dir / "a.lrc")
        _touch(temp_dir / "sub" / "c.ogg")

        files = list(scan_library(temp_dir))

        assert [f.path.name for f in files] == ["a.FLAC", "b.mp3"]
        assert files[0].extension is AudioFormat.FLAC

    def test_recursive(self, temp_dir):
        _touch(temp_dir / "z.mp3")
        _touch(temp_dir / "Album" / "01.flac")
        _touch(temp_dir / "Album" / "Disc 2" / "01.m4a")
        _touch(temp_dir / "Album" / "folder.jpg")

        files = list(scan_library(temp_dir, recursive=True))

        assert [f.path.relative_to(temp_dir).as_posix() for f in files] == [
            "Album/01.flac",
            "Album/Disc 2/01.m4a",
            "z.mp3",
        ]

    def test_order_is_stable(self, temp_dir):
        for name in ("c.mp3", "a.mp3", "b.mp3"):
            _touch(temp_dir / name)

        first = [f.path for f in scan_library(temp_dir, recursive=True)]
        second = [f.path for f in scan_library(temp_dir, recursive=True)]

        assert first == second

    def test_empty_directory(self, temp_dir):
        assert list(scan_library(temp_dir, recursive=True)) == []

    def test_single_supported_file(self, temp_dir):
        path = _touch(temp_dir / "song.wav")
        files = list(scan_library(path))
        assert files == [AudioFile(path=path, extension=AudioFormat.WAV)]

    def test_single_unsupported_file(self, temp_dir):
        path = _touch(temp_dir / "notes.txt")
        assert list(scan_library(path, recursive=True)) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_directory_symlink_loop_is_not_followed(self, temp_dir):
        _touch(temp_dir / "Album" / "01.mp3")
        os.symlink(temp_dir, temp_dir / "Album" / "loop", target_is_directory=True)

        files = list(scan_library(temp_dir, recursive=True))

        assert [f.path.name for f in files] == ["01.mp3"]

    def test_unreadable_subdirectory_is_skipped(self, temp_dir, caplog):
        _touch(temp_dir / "a.mp3")
        _touch(temp_dir / "b_locked" / "hidden.mp3")
        _touch(temp_dir / "c.mp3")
        _touch(temp_dir / "d" / "01.flac")
        locked = temp_dir / "b_locked"
        real_scandir = os.scandir

        def scandir(path):
            if Path(path) == locked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("lrcphile.library.scanner.os.scandir", side_effect=scandir):
            with caplog.at_level(logging.WARNING, logger="lrcphile.library.scanner"):
                files = list(scan_library(temp_dir, recursive=True))

        assert [f.path.relative_to(temp_dir).as_posix() for f in files] == [
            "a.mp3",
            "c.mp3",
            "d/01.flac",
        ]
        assert any(
            record.levelno == logging.WARNING and "b_locked" in record.getMessage()
            for record in caplog.records
        )
