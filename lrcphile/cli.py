"""
Command-line interface for lrcphile.

This module implements the CLI using Click. rich-click is used for the
help output colors.

Usage:
    lrcphile                          Fetch lyrics for the music directory
    lrcphile ~/Music/Album            Fetch lyrics for one directory
    lrcphile song.flac                Fetch lyrics for one file
    lrcphile -r ~/Music               Include all subdirectories
    lrcphile -r -o ~/Music            Replace existing .lrc/.txt files
    lrcphile -s ~/Music               Only print warnings, errors and the summary
    lrcphile -u http://localhost:3000 Use a self-hosted LRCLIB instance

Configuration:
    Optional lrcphile.yaml in the current directory (or --config FILE).
    Command-line flags take precedence over the file.

Exit Codes:
    0    Run completed (even if some files failed)
    1    Path does not exist, or unexpected error
    2    Configuration error
    130  Interrupted by user
"""

import sys
from pathlib import Path
from typing import Optional

import rich_click as click

from lrcphile import __version__
from lrcphile.core import (
    Config,
    ConfigError,
    LrcphileError,
    NotFoundError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from lrcphile.core.config import default_music_directory
from lrcphile.lyrics.client import LrclibClient
from lrcphile.pipeline import RunSummary, fetch_library_lyrics

# Configure rich-click for better help formatting
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = ""
click.rich_click.MAX_WIDTH = 100
click.rich_click.OPTION_GROUPS = {
    "lrcphile": [
        {
            "name": "Library",
            "options": ["--recursive", "--override"],
        },
        {
            "name": "Lyrics Service",
            "options": ["--url", "--timeout"],
        },
        {
            "name": "Output",
            "options": ["--silent", "--config"],
        },
        {
            "name": "Info",
            "options": ["--version", "--help"],
        },
    ],
}

logger = get_logger(__name__)


@click.command(name="lrcphile")
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "-r", "--recursive",
    is_flag=True,
    help="Recursively process subdirectories"
)
@click.option(
    "-o", "--override", "--override-files", "override_files",
    is_flag=True,
    help="Override existing lyrics files"
)
@click.option(
    "-s", "--silent",
    is_flag=True,
    help="Only print warnings, errors and the final summary"
)
@click.option(
    "-u", "--url",
    type=str,
    default=None,
    metavar="<url>",
    help="URL for the lyrics database instance (e.g., self-hosted LRCLIB) [default: https://lrclib.net]"
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    metavar="<seconds>",
    help="Per-request timeout in seconds [default: 15]"
)
@click.option(
    "--config", "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    metavar="<file.yaml>",
    help="Configuration file (default: ./lrcphile.yaml if present)"
)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit."
)
@click.pass_context
def cli(
    ctx: click.Context,
    path: Optional[Path],
    recursive: bool,
    override_files: bool,
    silent: bool,
    url: Optional[str],
    timeout: Optional[float],
    config_path: Optional[Path],
    version: bool
) -> None:
    """
    lrcphile: fetch synced and plain lyrics for your music library.

    Reads title, artist, album and duration from each audio file, looks the
    track up on LRCLIB and saves the lyrics next to the file as
    [bold].lrc[/bold] (synced) and [bold].txt[/bold] (plain).

    PATH is an audio file or a directory (defaults to your music directory).
    """
    if version:
        click.echo(f"lrcphile {__version__}")
        ctx.exit(0)

    options = {
        "path": path,
        "recursive": recursive,
        "override": override_files,
        "silent": silent,
        "url": url,
        "timeout": timeout,
        "config_path": config_path,
    }
    _run(options)


def _run(options: dict) -> None:
    """
    Execute a lyrics run based on CLI options.

    1. Load configuration
    2. Set up logging
    3. Resolve effective settings (flags over config)
    4. Run the pipeline and print the summary

    Raises:
        SystemExit: On fatal errors (with the appropriate exit code).
    """
    try:
        config = load_config(options["config_path"])
        setup_logging(config.logging.directory, silent=options["silent"])

        root = _resolve_root(options["path"], config)
        recursive = options["recursive"] or config.library.recursive
        override = options["override"] or config.library.override
        url = (options["url"] or config.lyrics.url).rstrip("/")
        timeout = options["timeout"] or config.lyrics.timeout

        logger.debug(
            f"Run settings: root={root} recursive={recursive} "
            f"override={override} url={url} timeout={timeout}"
        )

        with LrclibClient(url, timeout=timeout, user_agent=config.lyrics.user_agent) as client:
            summary = fetch_library_lyrics(
                root,
                client,
                recursive=recursive,
                override=override,
                show_progress=not options["silent"],
            )

        _print_summary(summary)

    except ConfigError as e:
        click.echo(f"Configuration error: {e.message}", err=True)
        sys.exit(2)

    except NotFoundError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    except LrcphileError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error(f"Error: {e.message}", exc_info=True)
        sys.exit(1)

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        logger.exception("Unexpected error")
        sys.exit(1)

    finally:
        shutdown_logging()


def _resolve_root(path: Optional[Path], config: Config) -> Path:
    """PATH argument, else configured library directory, else the music directory."""
    if path is not None:
        return path.expanduser()
    if config.library.directory is not None:
        return config.library.directory
    return default_music_directory()


def _print_summary(summary: RunSummary) -> None:
    """
    Print the final summary.

    Always printed, also in silent mode.
    """
    click.echo("")
    click.echo(click.style("Processing Summary:", fg="bright_cyan", bold=True))
    click.echo(f"  Processed: {summary.total} files")
    click.echo(click.style(f"  Written:   {summary.written} files", fg="green"))
    click.echo(click.style(f"  Skipped:   {summary.skipped} files", fg="yellow"))
    click.echo(click.style(f"  Failed:    {summary.failed} files", fg="red"))
    logger.debug(
        f"Summary: written={summary.written} skipped={summary.skipped} "
        f"failed={summary.failed}"
    )


def main() -> None:
    """
    Entry point for the CLI.

    This function is called when running `lrcphile` from the command line.
    """
    cli()


if __name__ == "__main__":
    main()
