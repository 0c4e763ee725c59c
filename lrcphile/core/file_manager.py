"""
Lyrics file management for lrcphile.

Writes lookup results next to the audio files they belong to.

Layout:
    Music/
    ├── 01 - Song.flac
    ├── 01 - Song.lrc     # synced lyrics (LRC header + timestamped lines)
    └── 01 - Song.txt     # plain lyrics

Override Policy:
    Each target is decided on its own:
    - missing                      -> written
    - exists, override disabled    -> left byte-identical
    - exists, override enabled     -> replaced

    So a track whose .lrc already exists can still get a missing .txt.

Atomic Writes:
    Content is written to a hidden temporary file in the same directory,
    then moved over the target with os.replace(). A failed write removes
    the temporary file and never touches an existing target.

Usage:
    from lrcphile.core.file_manager import LyricsFileWriter

    writer = LyricsFileWriter(override=False)
    outcome = writer.write(audio_file, result)
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from lrcphile.core.exceptions import LrcphileError, WriteError
from lrcphile.core.logger import get_logger
from lrcphile.library.models import AudioFile
from lrcphile.lyrics.lrc import render_lrc, render_plain
from lrcphile.lyrics.models import Found, Instrumental, LyricsResult

logger = get_logger(__name__)


SKIP_INSTRUMENTAL = "instrumental"
SKIP_NOT_FOUND = "no lyrics found"
SKIP_EXISTING = "lyrics files already exist"


@dataclass(frozen=True)
class Written:
    """At least one lyrics file was written. paths lists them."""
    paths: tuple[Path, ...]


@dataclass(frozen=True)
class Skipped:
    """Nothing was written. reason says why."""
    reason: str


@dataclass(frozen=True)
class Failed:
    """Processing the file failed. error is the cause."""
    error: LrcphileError

    @property
    def reason(self) -> str:
        return self.error.message


ProcessOutcome = Union[Written, Skipped, Failed]


def write_text_atomic(target: Path, content: str) -> None:
    """
    Write text to target atomically (UTF-8).

    Args:
        target: Final file path.
        content: Text to write.

    Raises:
        WriteError: If the temporary file cannot be created or written, or
                    the final replace fails. The target is unchanged.
    """
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
        raise WriteError(
            f"Failed to write {target.name}: {e.strerror or e}",
            details={"file_path": str(target), "original_error": str(e)}
        ) from e


class LyricsFileWriter:
    """
    Decides and performs the lyrics writes for one audio file.

    Attributes:
        override: Replace lyrics files that already exist.
    """

    def __init__(self, override: bool = False) -> None:
        self.override = override

    def write(self, audio_file: AudioFile, result: LyricsResult) -> ProcessOutcome:
        """
        Write the sibling files for a lookup result.

        Args:
            audio_file: The audio file the lyrics belong to.
            result: The lookup result.

        Returns:
            Written if any file was written, Failed if any target could
            not be written (other targets are still attempted), otherwise
            Skipped.
        """
        if isinstance(result, Instrumental):
            return Skipped(SKIP_INSTRUMENTAL)
        if not isinstance(result, Found):
            return Skipped(SKIP_NOT_FOUND)

        targets: list[tuple[Path, str]] = []
        if result.is_synced:
            targets.append((audio_file.lrc_path, render_lrc(result)))
        if result.plain is not None:
            targets.append((audio_file.txt_path, render_plain(result)))

        written: list[Path] = []
        errors: list[WriteError] = []
        for target, content in targets:
            if target.exists() and not self.override:
                logger.debug(f"Keeping existing {target.name}")
                continue
            try:
                write_text_atomic(target, content)
            except WriteError as e:
                errors.append(e)
                continue
            written.append(target)
            logger.debug(f"Wrote {target}")

        if errors:
            return Failed(errors[0])
        if written:
            return Written(tuple(written))
        return Skipped(SKIP_EXISTING)

    def has_all_targets(self, audio_file: AudioFile) -> bool:
        """
        Check whether nothing could be written for this file.

        True when override is disabled and both the .lrc and .txt
        siblings already exist.
        """
        if self.override:
            return False
        return audio_file.lrc_path.exists() and audio_file.txt_path.exists()
