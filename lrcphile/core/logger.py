"""
Logging configuration for lrcphile.

This module sets up the logging system with multiple outputs:
    - Console: Colored, compact messages written with tqdm.write() so they
      appear above an active progress bar instead of breaking it
    - log_full_<timestamp>.log: Complete log of all events (DEBUG and above)
    - log_errors_<timestamp>.log: Only ERROR and CRITICAL messages
    - missing_lyrics_<timestamp>.log: Tracks the lyrics service has no lyrics for
    - failed_tracks_<timestamp>.log: Tracks that failed, with the reason

File outputs are only created when a log directory is configured
(logging.directory in lrcphile.yaml). The console handler is always set up.

Usage:
    from lrcphile.core.logger import setup_logging, get_logger

    setup_logging(log_dir, silent=False)  # Call once at startup
    logger = get_logger(__name__)         # Get logger for each module

    logger.info("Fetching lyrics")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


# Log file name prefixes (a timestamp and .log are appended)
LOG_FULL_PREFIX = "log_full"
LOG_ERRORS_PREFIX = "log_errors"
MISSING_LYRICS_PREFIX = "missing_lyrics"
FAILED_TRACKS_PREFIX = "failed_tracks"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extra-field markers picked up by the report handlers
MISSING_LYRICS_FIELD = "missing_lyrics_track_path"
FAILED_TRACK_FIELD = "failed_track_path"
FAILED_TRACK_REASON_FIELD = "failed_track_reason"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that prefixes console messages with a colored level name.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        return f"{color}{record.levelname}{Colors.RESET}: {record.getMessage()}"


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes through tqdm.write().

    tqdm.write() coordinates with active progress bars so log lines are
    printed above them. The stream is resolved at emit time rather than at
    construction, so a progress display that temporarily redirects
    sys.stderr still receives the messages.

    Attributes:
        stream: Explicit output stream, or None to use the current sys.stderr.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream or sys.stderr)
        except Exception:
            self.handleError(record)


class TrackReportHandler(logging.Handler):
    """
    Handler that turns marked log records into a plain per-track report.

    Only records carrying the handler's marker attribute (set through the
    ``extra`` argument of a logging call) are written; every other record
    is ignored. Each report entry is the track path, optionally followed
    by a reason line, then a blank line:

        /music/Artist/01 - Song.flac
        no lyrics found

    Attributes:
        report_path: Path to the report file.
        marker_field: Record attribute holding the track path.
        reason_field: Optional record attribute holding the reason.
        report_file: Open file handle (set by open()).

    Usage:
        handler = TrackReportHandler(path, FAILED_TRACK_FIELD, FAILED_TRACK_REASON_FIELD)
        handler.open()
        logging.getLogger().addHandler(handler)
    """

    def __init__(
        self,
        report_path: Path,
        marker_field: str,
        reason_field: str | None = None
    ) -> None:
        super().__init__()
        self.report_path = report_path
        self.marker_field = marker_field
        self.reason_field = reason_field
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file for writing (overwrites existing content)."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, self.marker_field) or self.report_file is None:
            return

        try:
            self.report_file.write(f"{getattr(record, self.marker_field)}\n")
            if self.reason_field is not None:
                reason = getattr(record, self.reason_field, None)
                if reason:
                    self.report_file.write(f"{reason}\n")
            self.report_file.write("\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the report file handle. Safe to call multiple times."""
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only passes ERROR and CRITICAL records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path | None = None, silent: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        log_dir: Directory for log files. None disables file outputs.
                 Created if it does not exist.
        silent: Raise the console threshold to WARNING, hiding per-file
                progress messages. File outputs are unaffected.

    Behavior:
        1. Reset the root logger (level DEBUG, no handlers)
        2. Add the tqdm-compatible console handler with colors
        3. If log_dir is set, add the full log, error log, missing lyrics
           report and failed tracks report handlers. Each run gets new
           files with a unique timestamp.

    Thread Safety:
        Not thread-safe. Call once from the main thread at startup.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(logging.WARNING if silent else logging.INFO)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    # Third-party loggers are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    full_handler = logging.FileHandler(
        log_dir / f"{LOG_FULL_PREFIX}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    root_logger.addHandler(full_handler)

    error_handler = logging.FileHandler(
        log_dir / f"{LOG_ERRORS_PREFIX}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    root_logger.addHandler(error_handler)

    missing_handler = TrackReportHandler(
        log_dir / f"{MISSING_LYRICS_PREFIX}_{timestamp}.log",
        MISSING_LYRICS_FIELD,
    )
    missing_handler.open()
    root_logger.addHandler(missing_handler)

    failed_handler = TrackReportHandler(
        log_dir / f"{FAILED_TRACKS_PREFIX}_{timestamp}.log",
        FAILED_TRACK_FIELD,
        FAILED_TRACK_REASON_FIELD,
    )
    failed_handler.open()
    root_logger.addHandler(failed_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Note:
        Loggers obtained before setup_logging() is called have no handlers
        of their own and propagate to the root logger once it is configured.
    """
    return logging.getLogger(name)


def log_missing_lyrics(logger: logging.Logger, track_path: Path, description: str) -> None:
    """
    Log a track the lyrics service has no lyrics for.

    The record carries the extra field the missing lyrics report handler
    looks for.

    Args:
        logger: The logger to use.
        track_path: The audio file path.
        description: "Artist - Title" for the console message.
    """
    logger.info(
        f"No lyrics found: {description}",
        extra={MISSING_LYRICS_FIELD: str(track_path)}
    )


def log_track_failure(logger: logging.Logger, track_path: Path, reason: str) -> None:
    """
    Log a track that could not be processed.

    Logs at ERROR level with the extra fields the failed tracks report
    handler looks for.

    Args:
        logger: The logger to use.
        track_path: The audio file path.
        reason: Why the track failed (the error message).
    """
    logger.error(
        f"Failed: {track_path.name} - {reason}",
        extra={
            FAILED_TRACK_FIELD: str(track_path),
            FAILED_TRACK_REASON_FIELD: reason,
        }
    )


def shutdown_logging() -> None:
    """
    Flush and close all handlers on the root logger.

    Called at program exit so report files are complete on disk.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
        root_logger.removeHandler(handler)
