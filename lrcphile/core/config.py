"""
Configuration management for lrcphile.

This module loads and validates the optional YAML configuration file.
Every section and every key is optional; anything not set falls back to
the defaults below, and command-line flags override both.

Configuration File Location:
    lrcphile.yaml in the current working directory, or an explicit
    path given with --config. An explicit path must exist; the implicit
    one is simply skipped when absent.

Example lrcphile.yaml:
    lyrics:
      url: "https://lrclib.net"
      timeout: 15
      user_agent: "lrcphile v0.1.0 (https://github.com/khalil-cheddadi/lrcphile)"

    library:
      directory: "~/Music"
      recursive: false
      override: false

    logging:
      directory: null  # Optional: write log files here
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from lrcphile import __version__
from lrcphile.core.exceptions import ConfigError


# Default configuration file name (looked up in the current working directory)
CONFIG_FILENAME = "lrcphile.yaml"

DEFAULT_LYRICS_URL = "https://lrclib.net"
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = f"lrcphile v{__version__} (https://github.com/khalil-cheddadi/lrcphile)"


@dataclass(frozen=True)
class LyricsConfig:
    """
    Lyrics service configuration.

    Attributes:
        url: Base URL of the LRCLIB-compatible service (no trailing slash).
        timeout: Per-request timeout in seconds.
        user_agent: User-Agent header sent with every request.
    """
    url: str = DEFAULT_LYRICS_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True)
class LibraryConfig:
    """
    Music library configuration.

    Attributes:
        directory: Library root used when no PATH argument is given.
                   None means the platform music directory.
        recursive: Descend into subdirectories by default.
        override: Overwrite existing lyrics files by default.
    """
    directory: Path | None = None
    recursive: bool = False
    override: bool = False


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging configuration.

    Attributes:
        directory: Directory for log files. None disables file logging.
    """
    directory: Path | None = None


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration.

    Created by load_config() and treated as immutable.

    Example:
        config = load_config()
        print(f"Querying {config.lyrics.url}")
    """
    lyrics: LyricsConfig = field(default_factory=LyricsConfig)
    library: LibraryConfig = field(default_factory=LibraryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_music_directory() -> Path:
    """
    Return the platform music directory.

    Lookup order:
        1. $XDG_MUSIC_DIR
        2. XDG_MUSIC_DIR in $XDG_CONFIG_HOME/user-dirs.dirs
           (~/.config/user-dirs.dirs when XDG_CONFIG_HOME is unset)
        3. ~/Music
    """
    xdg_music = os.environ.get("XDG_MUSIC_DIR")
    if xdg_music:
        return Path(xdg_music).expanduser()

    user_dirs_music = _read_user_dirs_music()
    if user_dirs_music is not None:
        return user_dirs_music

    return Path.home() / "Music"


def _read_user_dirs_music() -> Path | None:
    """
    Read XDG_MUSIC_DIR from the xdg-user-dirs file.

    Lines look like XDG_MUSIC_DIR="$HOME/Music". A value equal to $HOME
    means the directory is disabled.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    user_dirs = base / "user-dirs.dirs"

    try:
        with open(user_dirs, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError:
        return None

    home = Path.home()
    for line in lines:
        key, sep, value = line.strip().partition("=")
        if not sep or key.strip() != "XDG_MUSIC_DIR":
            continue
        value = value.strip().strip('"')
        if value.startswith("$HOME"):
            path = home / value[len("$HOME"):].lstrip("/")
        else:
            path = Path(value)
        if not path.is_absolute() or path == home:
            return None
        return path
    return None


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from a YAML file.

    Args:
        config_path: Optional explicit path to the config file.
                     If None, looks for lrcphile.yaml in the current
                     working directory.

    Returns:
        Config: A frozen dataclass with all configuration values.
                Defaults are returned when no implicit file exists.

    Raises:
        ConfigError: If an explicit file is missing, the file cannot be read,
                     has invalid YAML syntax, or contains invalid values.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    if not config_path.exists():
        if explicit:
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                details={"file_path": str(config_path)}
            )
        return Config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file parses to None
    if raw_config is None:
        return Config()

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return Config(
        lyrics=_parse_lyrics_config(_section(raw_config, "lyrics")),
        library=_parse_library_config(_section(raw_config, "library")),
        logging=_parse_logging_config(_section(raw_config, "logging")),
    )


def _section(raw_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section, or an empty dict if it is missing or null."""
    section = raw_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' must be a dictionary",
            details={"section": name}
        )
    return section


def _parse_lyrics_config(section: dict[str, Any]) -> LyricsConfig:
    """
    Parse and validate the 'lyrics' section.

    Raises:
        ConfigError: If url or user_agent is not a non-empty string, or
                     timeout is not a positive number.
    """
    url = section.get("url", DEFAULT_LYRICS_URL)
    if not isinstance(url, str) or not url.strip():
        raise ConfigError(
            "'lyrics.url' must be a non-empty string",
            details={"field": "lyrics.url"}
        )

    timeout = section.get("timeout", DEFAULT_TIMEOUT)
    # bool is an int subclass; reject it explicitly
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(
            "'lyrics.timeout' must be a positive number",
            details={"field": "lyrics.timeout", "value": timeout}
        )

    user_agent = section.get("user_agent", DEFAULT_USER_AGENT)
    if not isinstance(user_agent, str) or not user_agent.strip():
        raise ConfigError(
            "'lyrics.user_agent' must be a non-empty string",
            details={"field": "lyrics.user_agent"}
        )

    return LyricsConfig(
        url=url.strip().rstrip("/"),
        timeout=float(timeout),
        user_agent=user_agent.strip()
    )


def _parse_library_config(section: dict[str, Any]) -> LibraryConfig:
    """
    Parse and validate the 'library' section.

    Expands ~ in the directory and makes it absolute. Does NOT check that
    the directory exists; that happens when the library is scanned.
    """
    directory = _parse_optional_path(section, "library.directory", "directory")

    flags = {}
    for key in ("recursive", "override"):
        value = section.get(key, False)
        if not isinstance(value, bool):
            raise ConfigError(
                f"'library.{key}' must be true or false",
                details={"field": f"library.{key}", "value": value}
            )
        flags[key] = value

    return LibraryConfig(directory=directory, **flags)


def _parse_logging_config(section: dict[str, Any]) -> LoggingConfig:
    """Parse and validate the 'logging' section."""
    return LoggingConfig(
        directory=_parse_optional_path(section, "logging.directory", "directory")
    )


def _parse_optional_path(section: dict[str, Any], name: str, key: str) -> Path | None:
    raw = section.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ConfigError(
            f"'{name}' must be a non-empty string path or null",
            details={"field": name}
        )
    return Path(raw.strip()).expanduser().resolve()
