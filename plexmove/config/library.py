"""Library root configuration and validation."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from plexmove.config.settings import ENV_MOVIE_LIBRARY, ENV_TV_LIBRARY
from plexmove.exceptions import LibraryConfigError
from plexmove.models.media import MediaKind


@dataclass(frozen=True)
class LibraryRoots:
    """
    Library root directories, supplied by the caller.

    Attributes:
        movie_path: Root of the movie library.
        tv_path: Root of the TV library.
    """

    movie_path: Path
    tv_path: Path

    def root_for(self, kind: MediaKind) -> Path:
        """
        Return the library root for a media kind.

        Args:
            kind: Movie or TV episode.

        Returns:
            The matching library root.

        Raises:
            LibraryConfigError: For MediaKind.UNKNOWN.
        """
        if kind is MediaKind.MOVIE:
            return self.movie_path
        if kind is MediaKind.TV_EPISODE:
            return self.tv_path
        raise LibraryConfigError(f"No library root for media kind {kind.label}")


def resolve_library_roots(
    movie_path: Optional[str] = None,
    tv_path: Optional[str] = None,
) -> LibraryRoots:
    """
    Build LibraryRoots from explicit values or environment variables.

    Args:
        movie_path: Movie library path (falls back to PLEXMOVE_MOVIE_LIBRARY).
        tv_path: TV library path (falls back to PLEXMOVE_TV_LIBRARY).

    Returns:
        LibraryRoots instance.

    Raises:
        LibraryConfigError: If either root is not configured.
    """
    movie_path = movie_path or os.getenv(ENV_MOVIE_LIBRARY)
    tv_path = tv_path or os.getenv(ENV_TV_LIBRARY)

    missing = []
    if not movie_path:
        missing.append(ENV_MOVIE_LIBRARY)
    if not tv_path:
        missing.append(ENV_TV_LIBRARY)
    if missing:
        raise LibraryConfigError(
            f"Library paths not configured: {', '.join(missing)}"
        )

    return LibraryRoots(movie_path=Path(movie_path), tv_path=Path(tv_path))


def validate_library_roots(roots: LibraryRoots) -> None:
    """
    Check that both library roots exist and are directories.

    Args:
        roots: Library roots to check.

    Raises:
        LibraryConfigError: On the first invalid root.
    """
    for label, path in (("Movie", roots.movie_path), ("TV", roots.tv_path)):
        if not path.exists():
            raise LibraryConfigError(f"{label} library not found: {path}")
        if not path.is_dir():
            raise LibraryConfigError(f"{label} library path is not a directory: {path}")
    logger.debug(f"Library roots OK: movies={roots.movie_path} tv={roots.tv_path}")
