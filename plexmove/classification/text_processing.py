"""Text processing utilities for release names and titles."""

import re
from pathlib import PurePath

from plexmove.config.settings import SUBTITLE_EXTENSIONS, VIDEO_EXTENSIONS

# Extensions dropped before pattern matching
STRIPPABLE_EXTENSIONS = VIDEO_EXTENSIONS | SUBTITLE_EXTENSIONS | {
    ".nfo", ".txt", ".jpg", ".png", ".part", ".!qb",
}

# Characters left dangling in front of a dropped year/episode marker
_TRAILING_SEPARATORS = " -([{"

_WORD_SEPARATORS = re.compile(r'[._]')
_WHITESPACE = re.compile(r'\s+')


def base_name(name: str) -> str:
    """
    Reduce a filename or path to its final component without extension.

    Only known media/sidecar extensions are removed, so release names
    such as "Movie.2021" keep their trailing year.

    Args:
        name: Filename, directory name or full path.

    Returns:
        Final path component without its extension.

    Examples:
        >>> base_name("/downloads/Movie.2021.1080p.mkv")
        'Movie.2021.1080p'
        >>> base_name("Movie.2021")
        'Movie.2021'
    """
    final = PurePath(name.rstrip("/\\")).name if name else ""
    suffix = PurePath(final).suffix
    if suffix and suffix.lower() in STRIPPABLE_EXTENSIONS:
        return final[:-len(suffix)]
    return final


def clean_title(raw: str) -> str:
    """
    Turn the raw text preceding a marker into a display title.

    Replaces dots and underscores with spaces, drops separators left
    in front of the removed marker, collapses whitespace and trims.

    Args:
        raw: Raw title candidate.

    Returns:
        Cleaned title, possibly empty.

    Examples:
        >>> clean_title("Some.Movie.")
        'Some Movie'
        >>> clean_title("Movie Name (")
        'Movie Name'
        >>> clean_title("The_Show - ")
        'The Show'
    """
    if not raw:
        return ""

    title = _WORD_SEPARATORS.sub(' ', raw)
    title = title.rstrip(_TRAILING_SEPARATORS)
    title = _WHITESPACE.sub(' ', title)
    return title.strip()
