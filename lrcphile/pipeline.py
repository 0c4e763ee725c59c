"""
Lyrics fetching pipeline for lrcphile.

Drives every audio file through the same sequence and aggregates the
per-file outcomes into a run summary.

Per-file Workflow:
    Discovered -> MetadataExtracted -> LyricsResolved -> Written | Skipped
                                                      \\-> Failed (from any step)

    1. Read tags (MetadataError -> Failed, the service is never queried)
    2. If both lyrics files exist and override is off -> Skipped, no request
    3. Look up lyrics (LyricsLookupError -> Failed)
    4. Write sibling files (WriteError -> Failed)

A failure is recorded and the run moves on to the next file; only a
missing library root stops the run, and it does so before any file is
processed.

Usage:
    from lrcphile.pipeline import fetch_library_lyrics

    summary = fetch_library_lyrics(root, client, recursive=True)
    print(f"Wrote lyrics for {summary.written}/{summary.total} files")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from lrcphile.core.exceptions import LrcphileError
from lrcphile.core.file_manager import (
    SKIP_EXISTING,
    SKIP_NOT_FOUND,
    Failed,
    LyricsFileWriter,
    ProcessOutcome,
    Skipped,
    Written,
)
from lrcphile.core.logger import get_logger, log_missing_lyrics, log_track_failure
from lrcphile.core.progress import LyricsProgressBar
from lrcphile.library.metadata import read_track_metadata
from lrcphile.library.models import AudioFile
from lrcphile.library.scanner import scan_library
from lrcphile.lyrics.client import LrclibClient

logger = get_logger(__name__)


@dataclass
class RunSummary:
    """
    Statistics from a lyrics run.

    Attributes:
        written: Files for which at least one lyrics file was written.
        skipped: Files where nothing needed or could be written.
        failed: Files that failed (tags, lookup or write).
        outcomes: (audio file, outcome) pairs in processing order.
    """

    written: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: list[tuple[AudioFile, ProcessOutcome]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.written + self.skipped + self.failed

    def record(self, audio_file: AudioFile, outcome: ProcessOutcome) -> None:
        """Count one file's outcome."""
        if isinstance(outcome, Written):
            self.written += 1
        elif isinstance(outcome, Skipped):
            self.skipped += 1
        else:
            self.failed += 1
        self.outcomes.append((audio_file, outcome))


class LyricsPipeline:
    """
    Sequential per-file pipeline: tags -> lookup -> write.

    Attributes:
        client: Lyrics service client.
        writer: Lyrics file writer (carries the override policy).
        progress: Optional progress bar updated after each file.
    """

    def __init__(
        self,
        client: LrclibClient,
        writer: LyricsFileWriter,
        progress: LyricsProgressBar | None = None
    ) -> None:
        self.client = client
        self.writer = writer
        self.progress = progress

    def process_file(self, audio_file: AudioFile) -> ProcessOutcome:
        """
        Run one file through the pipeline.

        Returns:
            The file's outcome. Per-file errors are returned as Failed,
            never raised.
        """
        path = audio_file.path
        try:
            metadata = read_track_metadata(audio_file)

            if self.writer.has_all_targets(audio_file):
                return Skipped(SKIP_EXISTING)

            result = self.client.fetch_lyrics(metadata)
            outcome = self.writer.write(audio_file, result)
        except LrcphileError as e:
            return Failed(e)

        if isinstance(outcome, Skipped) and outcome.reason == SKIP_NOT_FOUND:
            log_missing_lyrics(logger, path, metadata.description)
        return outcome

    def run(self, audio_files: Iterable[AudioFile]) -> RunSummary:
        """
        Process every file and return the summary.

        Args:
            audio_files: Files to process, in order.
        """
        summary = RunSummary()
        for audio_file in audio_files:
            outcome = self.process_file(audio_file)
            self._report(audio_file, outcome)
            summary.record(audio_file, outcome)
        return summary

    def _report(self, audio_file: AudioFile, outcome: ProcessOutcome) -> None:
        path = audio_file.path
        if isinstance(outcome, Written):
            names = ", ".join(p.name for p in outcome.paths)
            logger.info(f"Written: {path.name} -> {names}")
        elif isinstance(outcome, Skipped):
            logger.debug(f"Skipped: {path.name} ({outcome.reason})")
        else:
            log_track_failure(logger, path, outcome.reason)

        if self.progress is not None:
            self.progress.update(
                success=isinstance(outcome, Written),
                skipped=isinstance(outcome, Skipped),
            )


def fetch_library_lyrics(
    root: Path,
    client: LrclibClient,
    recursive: bool = False,
    override: bool = False,
    show_progress: bool = True
) -> RunSummary:
    """
    Fetch lyrics for every supported audio file under root.

    This is the main entry point used by the CLI.

    Args:
        root: Audio file or directory.
        client: Lyrics service client.
        recursive: Descend into subdirectories.
        override: Replace existing lyrics files.
        show_progress: Display a progress bar while processing.

    Returns:
        RunSummary with per-outcome counts.

    Raises:
        NotFoundError: If root does not exist (before any processing).
    """
    audio_files = list(scan_library(root, recursive=recursive))
    logger.info(f"Found: {len(audio_files)} audio files")
    if not audio_files:
        logger.warning("No audio files found.")
        return RunSummary()

    writer = LyricsFileWriter(override=override)
    if not show_progress:
        return LyricsPipeline(client, writer).run(audio_files)

    with LyricsProgressBar(total=len(audio_files)) as progress:
        return LyricsPipeline(client, writer, progress).run(audio_files)
