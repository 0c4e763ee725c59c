"""Test the lyrics fetching pipeline"""

import pytest
from unittest.mock import Mock, patch

from lrcphile.core.exceptions import LyricsLookupError, MetadataError, NotFoundError
from lrcphile.core.file_manager import (
    SKIP_EXISTING,
    SKIP_INSTRUMENTAL,
    SKIP_NOT_FOUND,
    Failed,
    LyricsFileWriter,
    Skipped,
    Written,
)
from lrcphile.library.models import TrackMetadata
from lrcphile.lyrics.client import LrclibClient
from lrcphile.lyrics.models import Found, Instrumental, NotFound
from lrcphile.pipeline import LyricsPipeline, RunSummary, fetch_library_lyrics


FOUND = Found(synced="[00:01.00] Hello", plain="Hello", track_name="Song", artist_name="Artist")


@pytest.fixture
def client():
    client = Mock(spec=LrclibClient)
    client.fetch_lyrics.return_value = FOUND
    return client


@pytest.fixture
def metadata_reader():
    with patch("lrcphile.pipeline.read_track_metadata") as reader:
        reader.return_value = TrackMetadata(title="Song", artist="Artist")
        yield reader


class TestRunSummary:
    """Test RunSummary"""

    def test_record(self, make_audio_file):
        summary = RunSummary()
        audio_file = make_audio_file()

        summary.record(audio_file, Written((audio_file.lrc_path,)))
        summary.record(audio_file, Skipped(SKIP_EXISTING))
        summary.record(audio_file, Failed(MetadataError("No tags found")))

        assert (summary.written, summary.skipped, summary.failed) == (1, 1, 1)
        assert summary.total == 3
        assert len(summary.outcomes) == 3


class TestProcessFile:
    """Test LyricsPipeline.process_file()"""

    def test_written(self, make_audio_file, client, metadata_reader):
        audio_file = make_audio_file()

        outcome = LyricsPipeline(client, LyricsFileWriter()).process_file(audio_file)

        assert outcome == Written((audio_file.lrc_path, audio_file.txt_path))

    def test_metadata_error_skips_lookup(self, make_audio_file, client, metadata_reader):
        metadata_reader.side_effect = MetadataError("Missing required metadata (artist)")

        outcome = LyricsPipeline(client, LyricsFileWriter()).process_file(make_audio_file())

        assert isinstance(outcome, Failed)
        assert outcome.reason == "Missing required metadata (artist)"
        client.fetch_lyrics.assert_not_called()

    def test_lookup_error_fails(self, make_audio_file, client, metadata_reader):
        client.fetch_lyrics.side_effect = LyricsLookupError("Lyrics service timed out after 15s")

        outcome = LyricsPipeline(client, LyricsFileWriter()).process_file(make_audio_file())

        assert isinstance(outcome, Failed)
        assert isinstance(outcome.error, LyricsLookupError)

    def test_existing_files_skip_lookup(self, make_audio_file, client, metadata_reader):
        audio_file = make_audio_file()
        audio_file.lrc_path.write_text("old", encoding="utf-8")
        audio_file.txt_path.write_text("old", encoding="utf-8")

        outcome = LyricsPipeline(client, LyricsFileWriter()).process_file(audio_file)

        assert outcome == Skipped(SKIP_EXISTING)
        client.fetch_lyrics.assert_not_called()

    @pytest.mark.parametrize("result, reason", [
        (Instrumental(), SKIP_INSTRUMENTAL),
        (NotFound(), SKIP_NOT_FOUND),
    ])
    def test_no_lyrics(self, make_audio_file, client, metadata_reader, result, reason):
        client.fetch_lyrics.return_value = result

        outcome = LyricsPipeline(client, LyricsFileWriter()).process_file(make_audio_file())

        assert outcome == Skipped(reason)

    def test_progress_is_updated(self, make_audio_file, client, metadata_reader):
        progress = Mock()

        LyricsPipeline(client, LyricsFileWriter(), progress).run([make_audio_file()])

        progress.update.assert_called_once_with(success=True, skipped=False)


class TestFetchLibraryLyrics:
    """Test fetch_library_lyrics()"""

    def test_missing_root(self, temp_dir, client):
        with pytest.raises(NotFoundError):
            fetch_library_lyrics(temp_dir / "missing", client, show_progress=False)
        client.fetch_lyrics.assert_not_called()

    def test_empty_library(self, temp_dir, client):
        summary = fetch_library_lyrics(temp_dir, client, show_progress=False)
        assert summary == RunSummary()

    def test_mixed_library(self, make_audio_file, temp_dir, client, metadata_reader):
        """One tagged file gets lyrics, one untagged file fails, the run completes"""
        tagged = make_audio_file("a.flac")
        untagged = make_audio_file("b.mp3")
        make_audio_file("cover.jpg")

        def read(audio_file):
            if audio_file.path == untagged.path:
                raise MetadataError("Missing required metadata (title, artist)")
            return TrackMetadata(title="Song", artist="Artist")

        metadata_reader.side_effect = read

        summary = fetch_library_lyrics(temp_dir, client, show_progress=False)

        assert (summary.written, summary.skipped, summary.failed) == (1, 0, 1)
        assert tagged.lrc_path.exists()
        assert tagged.txt_path.exists()
        assert not untagged.lrc_path.exists()
        assert [a.path.name for a, _ in summary.outcomes] == ["a.flac", "b.mp3"]

    def test_second_run_is_idempotent(self, make_audio_file, temp_dir, client, metadata_reader):
        audio_file = make_audio_file("a.flac")

        first = fetch_library_lyrics(temp_dir, client, show_progress=False)
        lrc_before = audio_file.lrc_path.read_bytes()
        txt_before = audio_file.txt_path.read_bytes()
        second = fetch_library_lyrics(temp_dir, client, show_progress=False)

        assert first.written == 1
        assert (second.written, second.skipped, second.failed) == (0, 1, 0)
        assert audio_file.lrc_path.read_bytes() == lrc_before
        assert audio_file.txt_path.read_bytes() == txt_before
        assert client.fetch_lyrics.call_count == 1

    def test_recursive_flag(self, make_audio_file, temp_dir, client, metadata_reader):
        make_audio_file("top.mp3")
        nested = make_audio_file("Album/01.mp3")

        flat = fetch_library_lyrics(temp_dir, client, recursive=False, show_progress=False)
        deep = fetch_library_lyrics(temp_dir, client, recursive=True, show_progress=False)

        assert flat.total == 1
        assert deep.total == 2
        assert nested.lrc_path.exists()

    def test_with_progress_bar(self, make_audio_file, temp_dir, client, metadata_reader):
        make_audio_file("a.flac")
        done = make_audio_file("b.flac")
        done.lrc_path.write_text("old", encoding="utf-8")
        done.txt_path.write_text("old", encoding="utf-8")

        summary = fetch_library_lyrics(temp_dir, client, show_progress=True)

        assert (summary.written, summary.skipped, summary.failed) == (1, 1, 0)
