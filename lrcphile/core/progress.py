"""
Progress bar for lrcphile using the Rich library.

Usage:
    from lrcphile.core.progress import LyricsProgressBar

    # As context manager
    with LyricsProgressBar(total=100) as progress:
        for item in items:
            outcome = process(item)
            progress.update(success=..., skipped=...)

    # Manual control
    progress = LyricsProgressBar(total=50)
    progress.start()
    # ... do work with progress.update() ...
    progress.stop()
"""

from typing import Optional

from rich import get_console
from rich.console import JustifyMethod, OverflowMethod
from rich.highlighter import Highlighter
from rich.progress import (
    BarColumn,
    Progress,
    ProgressColumn,
    Task,
    TaskID,
)
from rich.style import StyleType
from rich.text import Text
from rich.theme import Theme


PROGRESS_THEME = Theme({
    "bar.back": "grey23",
    "bar.complete": "rgb(165,66,129)",
    "bar.finished": "rgb(114,156,31)",
    "bar.pulse": "rgb(165,66,129)",
    "progress.percentage": "white",
})


class SizedTextColumn(ProgressColumn):
    """
    Text column truncated (with optional ellipsis) to a fixed width.
    """

    def __init__(
        self,
        text_format: str,
        style: StyleType = "none",
        justify: JustifyMethod = "left",
        markup: bool = True,
        highlighter: Optional[Highlighter] = None,
        overflow: Optional[OverflowMethod] = None,
        width: int = 20,
    ) -> None:
        self.text_format = text_format
        self.justify: JustifyMethod = justify
        self.style = style
        self.markup = markup
        self.highlighter = highlighter
        self.overflow: Optional[OverflowMethod] = overflow
        self.width = width
        super().__init__()

    def render(self, task: Task) -> Text:
        """Render the column."""
        _text = self.text_format.format(task=task)
        if self.markup:
            text = Text.from_markup(_text, style=self.style, justify=self.justify)
        else:
            text = Text(_text, style=self.style, justify=self.justify)
        if self.highlighter:
            self.highlighter.highlight(text)

        text.truncate(max_width=self.width, overflow=self.overflow, pad=True)
        return text


class LyricsProgressBar:
    """
    Progress bar for the lyrics fetching run.

    Displays:
    - Description (e.g., "Lyrics")
    - Status: ✓ written, ⊘ skipped, ✗ failed
    - Progress bar
    - Percentage

    Example:
        Lyrics          ✓ 80  ⊘ 12  ✗ 3        ━━━━━━━━━━━━━━━━━  95%
    """

    def __init__(self, total: int, description: str = "Lyrics", status_width: int = 35):
        """
        Initialize the progress bar.

        Args:
            total: Total number of files to process.
            description: Description to show on the left.
            status_width: Width of the status column.
        """
        self.total = total
        self.description = description
        self.completed = 0
        self.written = 0
        self.skipped = 0
        self.failed = 0

        self.console = get_console()

        self.progress = Progress(
            SizedTextColumn(
                "[white]{task.description}",
                overflow="ellipsis",
                width=15,
            ),
            SizedTextColumn(
                "{task.fields[status]}",
                width=status_width,
                style="white",
            ),
            BarColumn(bar_width=40, finished_style="green"),
            "[progress.percentage]{task.percentage:>3.0f}%",
            console=self.console,
            transient=False,
            refresh_per_second=10,
        )

        self.task_id: Optional[TaskID] = None
        self._started = False

    def __enter__(self) -> "LyricsProgressBar":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def start(self) -> None:
        """Start the progress bar (can be called manually)."""
        if not self._started:
            self.console.push_theme(PROGRESS_THEME)
            self.progress.start()
            self.task_id = self.progress.add_task(
                description=self.description,
                total=self.total,
                status=self._get_status_text(),
            )
            self._started = True

    def stop(self) -> None:
        """Stop the progress bar and restore the console theme."""
        if self._started:
            self.progress.stop()
            self.console.pop_theme()
            self._started = False

    def update(self, success: bool, skipped: bool = False) -> None:
        """
        Record one processed file.

        Args:
            success: Whether at least one lyrics file was written.
            skipped: Whether the file was skipped (nothing to write).
                     Takes precedence over success.
        """
        self.completed += 1
        if skipped:
            self.skipped += 1
        elif success:
            self.written += 1
        else:
            self.failed += 1

        if self.task_id is not None:
            self.progress.update(
                self.task_id,
                completed=self.completed,
                status=self._get_status_text(),
            )

    def _get_status_text(self) -> str:
        parts = [
            f"[green]✓ {self.written}[/green]",
            f"[yellow]⊘ {self.skipped}[/yellow]",
            f"[red]✗ {self.failed}[/red]",
        ]
        return "  ".join(parts)
