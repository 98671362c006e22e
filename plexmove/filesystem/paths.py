"""Path containment checks for library destinations."""

from pathlib import Path
from typing import Union

from loguru import logger

from plexmove.exceptions import PathEscape


def validate_within(candidate: Union[str, Path], allowed_root: Union[str, Path]) -> Path:
    """
    Check that a destination stays inside its library root.

    Both paths are resolved to absolute form (".." segments and
    symlinks included) before comparison. The comparison is made on
    path components, so "/library/Movies2" is not inside
    "/library/Movies".

    Args:
        candidate: Computed destination path.
        allowed_root: Library root it must stay in.

    Returns:
        The resolved candidate path.

    Raises:
        PathEscape: If the candidate resolves outside the root.
    """
    resolved = Path(candidate).resolve()
    root = Path(allowed_root).resolve()

    if resolved != root and root not in resolved.parents:
        logger.error(f"Destination escapes library root: {candidate} (root: {allowed_root})")
        raise PathEscape(candidate, allowed_root)

    return resolved


def is_within(candidate: Union[str, Path], allowed_root: Union[str, Path]) -> bool:
    """Boolean form of validate_within()."""
    try:
        validate_within(candidate, allowed_root)
    except PathEscape:
        return False
    return True
