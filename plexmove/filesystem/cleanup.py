"""Source cleanup after a successful move."""

import shutil
from pathlib import Path
from typing import Iterable, List

from loguru import logger

from plexmove.exceptions import CleanupFailed
from plexmove.filesystem.paths import is_within


def _prune_empty_directories(start: Path, stop: Path) -> None:
    """Remove empty directories from start up to and including stop."""
    current = start
    while True:
        try:
            if current.is_dir() and not any(current.iterdir()):
                current.rmdir()
                logger.debug(f"Empty directory removed: {current}")
            else:
                return
        except OSError as e:
            logger.debug(f"Cannot remove directory {current}: {e}")
            return
        if current == stop:
            return
        current = current.parent


def remove_moved_files(
    moved_files: Iterable[Path],
    source_dir: Path,
    source_is_dir: bool,
) -> None:
    """
    Remove moved videos and subtitles from the download location.

    Directories emptied by the removal are deleted, the source
    directory included. Other files are left in place.

    Args:
        moved_files: Source paths of moved videos and subtitles.
        source_dir: Download directory (parent directory for a file download).
        source_is_dir: True if the download itself was a directory.

    Raises:
        CleanupFailed: If any file could not be removed. Every file is
            attempted before raising.
    """
    failures: List[str] = []
    parents = set()

    for path in moved_files:
        path = Path(path)
        if source_is_dir:
            outside = not is_within(path, source_dir)
        else:
            # Shared downloads folder: only its loose files belong to this download
            outside = path.parent.resolve() != Path(source_dir).resolve()
        if outside:
            failures.append(f"{path}: outside source directory")
            continue
        try:
            path.unlink()
            parents.add(path.parent)
            logger.debug(f"Source file removed: {path}")
        except FileNotFoundError:
            logger.debug(f"Source file already gone: {path}")
        except OSError as e:
            failures.append(f"{path}: {e}")

    if source_is_dir:
        # Deepest first so nested season folders go before their parent
        for parent in sorted(parents, key=lambda p: len(p.parts), reverse=True):
            _prune_empty_directories(parent, source_dir)

    if failures:
        raise CleanupFailed("Cleanup incomplete: " + "; ".join(failures))


def purge_source(path: Path) -> None:
    """
    Remove a whole download unconditionally.

    Only called once the user has confirmed that the leftovers may go.

    Args:
        path: Download file or directory.

    Raises:
        CleanupFailed: If the removal fails.
    """
    path = Path(path)
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        logger.debug(f"Source already removed: {path}")
        return
    except OSError as e:
        raise CleanupFailed(f"Cannot remove {path}: {e}") from e
    logger.info(f"Source removed: {path}")
