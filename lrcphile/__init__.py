"""
lrcphile: fetch synced and plain lyrics for a local music library.

This package batch-fetches lyrics from an LRCLIB-compatible service using
the tags of local audio files, and saves them next to each file as
.lrc (synced) and .txt (plain).

Architecture:
    Each audio file goes through the same pipeline, one file at a time:

    library/scanner.py: Find audio files
        - Single file or directory, optionally recursive
        - Supported: mp3, flac, wav, ogg, m4a, aac, opus, wma, ape, dsf, dff

    library/metadata.py: Read tags
        - Title and artist (required), album and duration (optional)

    lyrics/client.py: Look up lyrics
        - Exact match on /api/get, fallback to /api/search
        - Found / Instrumental / NotFound

    core/file_manager.py: Write lyrics files
        - <name>.lrc and <name>.txt beside the audio file
        - Existing files kept unless override is enabled

    pipeline.py: Orchestrate and summarize
        - Per-file failures are recorded, never fatal

Modules:
    core/       - Configuration, exceptions, logging, progress, file writing
    library/    - Audio file discovery and tag reading
    lyrics/     - LRCLIB client, result types, LRC rendering
    pipeline.py - Per-file orchestration and run summary
    cli.py      - Command-line interface

Usage:
    Command Line:
        lrcphile ~/Music -r
        lrcphile song.flac --override
        lrcphile ~/Music -r -u http://localhost:3000

    Python API:
        from lrcphile import LrclibClient, fetch_library_lyrics

        with LrclibClient() as client:
            summary = fetch_library_lyrics(Path("~/Music").expanduser(), client, recursive=True)

Dependencies:
    - mutagen: Audio tag reading
    - requests: HTTP client for the lyrics service
    - click / rich-click: CLI framework and colored help
    - rich: Progress bar
    - tqdm: Progress-bar-safe console logging
    - pyyaml: Configuration file parsing
"""

__version__ = "0.1.0"
__author__ = "lrcphile"
__license__ = "MIT"

# Convenience imports for common usage
from lrcphile.core import (
    Config,
    ConfigError,
    LrcphileError,
    LyricsLookupError,
    MetadataError,
    NotFoundError,
    WriteError,
    get_logger,
    load_config,
    setup_logging,
)
from lrcphile.lyrics import Found, Instrumental, LrclibClient, LyricsResult, NotFound
from lrcphile.pipeline import LyricsPipeline, RunSummary, fetch_library_lyrics

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "load_config",
    "setup_logging",
    "get_logger",
    # Exceptions
    "LrcphileError",
    "ConfigError",
    "NotFoundError",
    "MetadataError",
    "LyricsLookupError",
    "WriteError",
    # Lyrics
    "LrclibClient",
    "LyricsResult",
    "Found",
    "Instrumental",
    "NotFound",
    # Pipeline
    "LyricsPipeline",
    "RunSummary",
    "fetch_library_lyrics",
]
