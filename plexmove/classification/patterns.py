"""Individual filename heuristics.

Each extractor takes an extension-less release name and returns a
Classification when its pattern applies, or None so the dispatcher
can try the next one.
"""

import re
from typing import Optional

from plexmove.classification.text_processing import clean_title
from plexmove.config.settings import (
    CONFIDENCE_MOVIE,
    CONFIDENCE_NXNN,
    CONFIDENCE_SXXEXX,
    MAX_YEAR,
    MIN_YEAR,
)
from plexmove.models.media import Classification, MediaKind

SXXEXX_PATTERN = re.compile(r'S(\d{1,2})E(\d{1,2})', re.IGNORECASE)
NXNN_PATTERN = re.compile(r'(?<!\d)(\d{1,2})x(\d{2,3})(?!\d)', re.IGNORECASE)
YEAR_PATTERN = re.compile(r'(?<!\d)(\d{4})(?!\d)')


def _episode_from_match(name: str, match: re.Match, confidence: float) -> Classification:
    return Classification(
        kind=MediaKind.TV_EPISODE,
        title=clean_title(name[:match.start()]),
        season=int(match.group(1)),
        episode=int(match.group(2)),
        confidence=confidence,
    )


def extract_sxxexx(name: str) -> Optional[Classification]:
    """
    Detect a "S01E02" episode marker.

    Args:
        name: Release name without extension.

    Returns:
        TV classification, or None when the marker is absent.

    Examples:
        >>> extract_sxxexx("Show.Name.S01E02.720p").season
        1
    """
    match = SXXEXX_PATTERN.search(name)
    if not match:
        return None
    return _episode_from_match(name, match, CONFIDENCE_SXXEXX)


def extract_nxnn(name: str) -> Optional[Classification]:
    """
    Detect a "1x02" episode marker.

    Resolutions such as 1920x1080 are not episode markers: the season
    field may not be preceded by another digit.
    """
    match = NXNN_PATTERN.search(name)
    if not match:
        return None
    return _episode_from_match(name, match, CONFIDENCE_NXNN)


def extract_movie_year(name: str) -> Optional[Classification]:
    """
    Detect a release year between 1900 and 2099.

    The last plausible year that leaves a non-empty title wins, so
    "Blade.Runner.2049.2017" is titled "Blade Runner 2049" (2017) and
    "1917.2019" is titled "1917" (2019).

    Args:
        name: Release name without extension.

    Returns:
        Movie classification, or None when no year leaves a title.
    """
    for match in reversed(list(YEAR_PATTERN.finditer(name))):
        year = int(match.group(1))
        if not MIN_YEAR <= year <= MAX_YEAR:
            continue
        title = clean_title(name[:match.start()])
        if not title:
            continue
        return Classification(
            kind=MediaKind.MOVIE,
            title=title,
            year=year,
            confidence=CONFIDENCE_MOVIE,
        )
    return None
