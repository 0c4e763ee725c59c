"""
Library scanning for lrcphile.

Turns a root path (a single file or a directory) into a stream of
supported audio files.

Walk Order:
    Entries of each directory are visited in lexicographic name order,
    depth-first, so the order is stable for an unchanged filesystem.

Symbolic Links:
    Directory symlinks are not followed (a link pointing back up the tree
    would otherwise loop forever). File symlinks are treated as regular
    files.

Usage:
    from lrcphile.library.scanner import scan_library

    for audio_file in scan_library(Path("~/Music").expanduser(), recursive=True):
        print(audio_file.path)
"""

import os
from pathlib import Path
from typing import Iterator

from lrcphile.core.exceptions import NotFoundError
from lrcphile.core.logger import get_logger
from lrcphile.library.models import AudioFile, AudioFormat

logger = get_logger(__name__)


def scan_library(root: Path, recursive: bool = False) -> Iterator[AudioFile]:
    """
    Enumerate supported audio files under a root path.

    Args:
        root: A single audio file or a directory.
        recursive: Also yield files from all nested subdirectories.

    Returns:
        A lazy iterator of AudioFile. A file root yields itself if its
        extension is supported, otherwise nothing.

    Raises:
        NotFoundError: If root does not exist. Raised immediately, before
                       the returned iterator is consumed.
    """
    if not root.exists():
        raise NotFoundError(
            f"Path does not exist or is not a file or directory: {root}",
            details={"path": str(root)}
        )

    if root.is_dir():
        return _walk_directory(root, recursive)
    return _single_file(root)


def _single_file(path: Path) -> Iterator[AudioFile]:
    audio_format = AudioFormat.from_path(path)
    if audio_format is not None:
        yield AudioFile(path=path, extension=audio_format)


def _walk_directory(directory: Path, recursive: bool) -> Iterator[AudioFile]:
    """
    Yield supported files in one directory, descending if recursive.

    An unreadable subdirectory is logged and skipped.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.warning(f"Error reading directory {directory}: {e}")
        return

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            if recursive:
                yield from _walk_directory(path, recursive)
        elif entry.is_file():
            audio_format = AudioFormat.from_path(path)
            if audio_format is not None:
                yield AudioFile(path=path, extension=audio_format)
