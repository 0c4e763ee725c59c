"""
Lyrics lookup on LRCLIB.

    - models: Found / Instrumental / NotFound result types
    - client: LrclibClient with exact lookup and search fallback
    - lrc: .lrc / .txt content rendering
"""

from lrcphile.lyrics.client import LrclibClient
from lrcphile.lyrics.models import Found, Instrumental, LyricsResult, NotFound

__all__ = [
    "LrclibClient",
    "LyricsResult",
    "Found",
    "Instrumental",
    "NotFound",
]
