"""
Rendering of lyrics file contents.

LRC Format:
    Synced lyrics use LRC (LyRiCs) format with timestamps:
        [00:15.00]First line of the song
        [00:18.50]Second line continues

    The .lrc files written by lrcphile start with ID tags describing the
    matched record, so players and other tools can tell where they came from:
        [ti: Song Title]
        [ar: Artist Name]
        [al: Album Name]
        [length: 3:45]
        [by: lrcphile]
"""

from lrcphile.lyrics.models import Found


CREATOR_TAG = "lrcphile"


def format_length(seconds: float) -> str:
    """
    Format a duration as m:ss for the [length] tag.

    Example:
        format_length(225.4)  # "3:45"
    """
    total = max(int(seconds), 0)
    return f"{total // 60}:{total % 60:02d}"


def build_lrc_header(found: Found) -> str:
    """
    Build the ID tag block for an .lrc file.

    Tags whose value is unknown are left out; [by] is always present.
    """
    lines = []
    if found.track_name:
        lines.append(f"[ti: {found.track_name}]")
    if found.artist_name:
        lines.append(f"[ar: {found.artist_name}]")
    if found.album_name:
        lines.append(f"[al: {found.album_name}]")
    if found.duration:
        lines.append(f"[length: {format_length(found.duration)}]")
    lines.append(f"[by: {CREATOR_TAG}]")
    return "\n".join(lines)


def render_lrc(found: Found) -> str:
    """Full .lrc file content: header, then the synced lyrics."""
    if found.synced is None:
        raise ValueError("No synced lyrics to render")
    return f"{build_lrc_header(found)}\n{found.synced}\n"


def render_plain(found: Found) -> str:
    """Full .txt file content: the plain lyrics."""
    if found.plain is None:
        raise ValueError("No plain lyrics to render")
    return f"{found.plain}\n"
