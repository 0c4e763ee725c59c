"""
Core module for lrcphile.

This module provides the foundational components used throughout the application:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - logger: Logging system with console and file outputs
    - progress: Rich progress bar (imported directly, not re-exported)
    - file_manager: Lyrics file writing (imported directly, not re-exported)

Usage:
    from lrcphile.core import (
        Config, load_config,
        setup_logging, get_logger,
        LrcphileError, ConfigError, NotFoundError
    )
"""

from lrcphile.core.config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    LyricsConfig,
    load_config,
)
from lrcphile.core.exceptions import (
    ConfigError,
    LrcphileError,
    LyricsLookupError,
    MetadataError,
    NotFoundError,
    WriteError,
)
from lrcphile.core.logger import (
    get_logger,
    log_missing_lyrics,
    log_track_failure,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "LyricsConfig",
    "LibraryConfig",
    "LoggingConfig",
    "load_config",
    # Exceptions
    "LrcphileError",
    "ConfigError",
    "NotFoundError",
    "MetadataError",
    "LyricsLookupError",
    "WriteError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_missing_lyrics",
    "log_track_failure",
    "shutdown_logging",
]
