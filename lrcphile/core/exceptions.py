"""
Exception classes for lrcphile.

This module defines all custom exceptions used throughout the application.
Each exception carries a human-readable message plus an optional dictionary
of context, so callers can log details without parsing the message.

Exception Hierarchy:
    LrcphileError (base)
        ConfigError - Configuration file issues (fatal)
        NotFoundError - Library root path does not exist (fatal)
        MetadataError - Audio tags unreadable or incomplete (per file)
        LyricsLookupError - Lyrics service unreachable or misbehaving (per file)
        WriteError - Lyrics file could not be written (per file)

Only ConfigError and NotFoundError stop a run. The per-file errors are
recorded as failed outcomes by the pipeline and processing continues.
"""


class LrcphileError(Exception):
    """
    Base exception for all lrcphile errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g. file path,
                 URL, HTTP status, the original error).

    Example:
        try:
            metadata = read_track_metadata(audio_file)
        except LrcphileError as e:
            logger.error(f"Failed: {e.message}")
            logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(LrcphileError):
    """
    Raised when the configuration file is invalid.

    This is a CRITICAL error that stops the program before any file
    is processed.

    Common causes:
        - Explicit --config file does not exist
        - Invalid YAML syntax
        - A section is not a mapping
        - A value has the wrong type (e.g. negative timeout)

    Example:
        raise ConfigError(
            "'lyrics.timeout' must be a positive number",
            details={'field': 'lyrics.timeout', 'value': -1}
        )
    """
    pass


class NotFoundError(LrcphileError):
    """
    Raised when the library root path does not exist.

    This is a CRITICAL error. It is raised before the directory walk starts,
    so no file is processed.

    Example:
        raise NotFoundError(
            "Path does not exist: /music/missing",
            details={'path': '/music/missing'}
        )
    """
    pass


class MetadataError(LrcphileError):
    """
    Raised when an audio file's tags cannot be used for a lyrics lookup.

    This is a NON-CRITICAL error: the file is counted as failed and the
    run continues with the next file.

    Common causes:
        - File is corrupt or not recognized by mutagen
        - File has no tags at all
        - Title or artist tag is missing or blank
    """
    pass


class LyricsLookupError(LrcphileError):
    """
    Raised when the lyrics service could not answer a lookup.

    This is a NON-CRITICAL error, distinct from "no lyrics exist": a track
    whose lookup raised this error is counted as failed, never as missing.

    Common causes:
        - Connection refused, DNS failure, timeout
        - HTTP status other than 2xx (404 on the exact lookup excepted)
        - Response body is not the expected JSON

    Attributes:
        status_code: HTTP status of the failed response, if any.
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        status_code: int | None = None
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class WriteError(LrcphileError):
    """
    Raised when a lyrics file cannot be written next to its audio file.

    This is a NON-CRITICAL error. The target is left as it was before the
    attempt (a pre-existing file is never truncated or deleted).

    Common causes:
        - Permission denied on the audio file's directory
        - Disk full
        - Read-only filesystem
    """
    pass
