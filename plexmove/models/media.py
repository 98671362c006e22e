"""Media classification data model."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class MediaKind(Enum):
    """Detected type of media content."""

    UNKNOWN = "unknown"
    MOVIE = "movie"
    TV_EPISODE = "tv"

    @property
    def label(self) -> str:
        """Human-readable media type name."""
        return {
            MediaKind.MOVIE: "Movie",
            MediaKind.TV_EPISODE: "TV Show",
        }.get(self, "Unknown")


@dataclass(frozen=True)
class Classification:
    """
    Outcome of filename classification.

    Attributes:
        kind: Detected media kind.
        title: Cleaned title (show title for episodes).
        year: Release year, or None when unknown.
        season: Season number, 0 when unset.
        episode: Episode number, 0 when unset.
        confidence: Score in [0, 1].
    """

    kind: MediaKind = MediaKind.UNKNOWN
    title: str = ''
    year: Optional[int] = None
    season: int = 0
    episode: int = 0
    confidence: float = 0.0

    def with_overrides(
        self,
        title: Optional[str] = None,
        kind: Optional[MediaKind] = None,
        year: Optional[int] = None,
        season: Optional[int] = None,
    ) -> "Classification":
        """
        Return a copy carrying user corrections.

        Args:
            title: Replacement title.
            kind: Replacement media kind.
            year: Replacement year.
            season: Replacement season (fallback for season-less episodes).

        Returns:
            New Classification; the original is left untouched.
        """
        changes = {}
        if title is not None:
            changes['title'] = title
        if kind is not None:
            changes['kind'] = kind
        if year is not None:
            changes['year'] = year
        if season is not None:
            changes['season'] = season
        return replace(self, **changes)

    def is_movie(self) -> bool:
        """Check if this classification is a movie."""
        return self.kind is MediaKind.MOVIE

    def is_tv(self) -> bool:
        """Check if this classification is a TV episode."""
        return self.kind is MediaKind.TV_EPISODE

    def is_unknown(self) -> bool:
        """Check if detection failed."""
        return self.kind is MediaKind.UNKNOWN
