"""Video and subtitle discovery inside a finished download."""

from pathlib import Path
from typing import Generator, Iterable, List

from loguru import logger

from plexmove.config.settings import (
    PRINCIPAL_VIDEO_MAX_DEPTH,
    SAMPLE_MARKER,
    SEASON_PACK_MAX_DEPTH,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from plexmove.exceptions import NoVideoFound, SourceNotFound


def is_video(path: Path) -> bool:
    """Check if a path has a recognized video extension."""
    return path.suffix.lower() in VIDEO_EXTENSIONS


def is_subtitle(path: Path) -> bool:
    """Check if a path has a recognized subtitle extension."""
    return path.suffix.lower() in SUBTITLE_EXTENSIONS


def is_sample(path: Path) -> bool:
    """Check if a file is a sample clip."""
    return SAMPLE_MARKER in path.name.lower()


def walk_files(directory: Path, max_depth: int) -> Generator[Path, None, None]:
    """
    Yield regular files up to max_depth levels below directory.

    Depth 1 yields the immediate entries only, depth 2 also yields the
    files of immediate subdirectories.

    Args:
        directory: Directory to scan.
        max_depth: Maximum depth, at least 1.

    Yields:
        Path objects for each file found.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.warning(f"Cannot read directory {directory}: {e}")
        return

    for entry in entries:
        if entry.is_dir():
            if max_depth > 1:
                yield from walk_files(entry, max_depth - 1)
        elif entry.is_file():
            yield entry


def _content_videos(files: Iterable[Path]) -> List[Path]:
    return [f for f in files if is_video(f) and not is_sample(f)]


def find_principal_video(path: Path) -> Path:
    """
    Find the main video of a download.

    A video file is returned as is. For a directory, only immediate
    entries are considered and the largest non-sample video wins.

    Args:
        path: Download file or directory.

    Returns:
        Path to the principal video.

    Raises:
        SourceNotFound: If the path does not exist.
        NoVideoFound: If no suitable video exists.
    """
    path = Path(path)
    if not path.exists():
        raise SourceNotFound(f"Source not found: {path}")

    if not path.is_dir():
        if is_video(path):
            return path
        raise NoVideoFound(f"Not a video file: {path}")

    files = list(walk_files(path, PRINCIPAL_VIDEO_MAX_DEPTH))
    candidates = _content_videos(files)
    if not candidates:
        found = [f.name for f in files]
        raise NoVideoFound(f"No video files in {path} - found: {found}")

    largest = max(candidates, key=lambda f: f.stat().st_size)
    logger.debug(f"Principal video: {largest.name} ({largest.stat().st_size} bytes)")
    return largest


def find_all_videos(path: Path) -> List[Path]:
    """
    Find every episode of a season pack.

    Scans up to two levels deep and ignores samples. The result is
    sorted by path, which matches episode order for well-named
    releases.

    Args:
        path: Download file or directory.

    Returns:
        Sorted list of video paths (a single video file yields itself).

    Raises:
        SourceNotFound: If the path does not exist.
        NoVideoFound: If no suitable video exists.
    """
    path = Path(path)
    if not path.exists():
        raise SourceNotFound(f"Source not found: {path}")

    if not path.is_dir():
        if is_video(path):
            return [path]
        raise NoVideoFound(f"Not a video file: {path}")

    videos = sorted(_content_videos(walk_files(path, SEASON_PACK_MAX_DEPTH)))
    if not videos:
        raise NoVideoFound(f"No video files found in {path}")

    logger.debug(f"{len(videos)} video(s) found in {path.name}")
    return videos


def _subtitle_base(path: Path) -> Path:
    return path if path.is_dir() else path.parent


def find_subtitles(path: Path) -> List[Path]:
    """
    Find subtitle files up to two levels below a download.

    For a file, its parent directory is scanned.

    Args:
        path: Download file or directory.

    Returns:
        Sorted list of subtitle paths (empty if the path is missing).
    """
    path = Path(path)
    if not path.exists():
        return []

    base_dir = _subtitle_base(path)
    return sorted(f for f in walk_files(base_dir, SEASON_PACK_MAX_DEPTH) if is_subtitle(f))


def find_subtitles_for_video(
    base_dir: Path,
    video_path: Path,
    max_depth: int = SEASON_PACK_MAX_DEPTH,
) -> List[Path]:
    """
    Find the subtitles belonging to one video.

    A subtitle belongs to the video when its name starts with the
    video's name without extension (case-insensitive), e.g.
    "Show.S01E01.en.srt" for "Show.S01E01.mkv".

    Args:
        base_dir: Directory to scan.
        video_path: The video file.
        max_depth: Scan depth; 1 for a loose file in a shared folder so
            subtitles of neighbouring downloads are never picked up.

    Returns:
        Sorted list of matching subtitle paths.
    """
    base_dir = Path(base_dir)
    if not base_dir.is_dir():
        return []

    prefix = Path(video_path).stem.lower()
    return sorted(
        f for f in walk_files(base_dir, max_depth)
        if is_subtitle(f) and f.name.lower().startswith(prefix)
    )


def find_remaining_entries(source_dir: Path, moved: Iterable[Path]) -> List[str]:
    """
    List the top-level entries of a source directory that were not moved.

    These are the leftovers (NFOs, screenshots, samples) a user may
    want to delete by hand.

    Args:
        source_dir: Download directory.
        moved: Source paths of moved videos and subtitles.

    Returns:
        Sorted entry names; empty if the directory is gone.
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        return []

    moved_names = {Path(p).name for p in moved}
    try:
        return sorted(
            entry.name for entry in source_dir.iterdir()
            if entry.name not in moved_names
        )
    except OSError as e:
        logger.warning(f"Cannot list remaining files in {source_dir}: {e}")
        return []
