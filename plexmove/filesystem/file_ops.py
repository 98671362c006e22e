"""Directory creation with optional privilege escalation."""

import subprocess
from pathlib import Path

from loguru import logger

from plexmove.config.settings import ELEVATION_PREFIX
from plexmove.exceptions import TransferFailed


def ensure_directory(path: Path, elevated: bool = False) -> None:
    """
    Create a destination directory if it does not exist yet.

    The unprivileged mkdir is always tried first; "sudo -n mkdir -p"
    is only attempted when it fails and elevation was requested.
    An existing directory is not an error.

    Args:
        path: Directory to create.
        elevated: Allow falling back to sudo.

    Raises:
        TransferFailed: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        return
    except OSError as e:
        if not elevated:
            raise TransferFailed(f"Cannot create directory {path}: {e}") from e
        logger.debug(f"mkdir failed for {path} ({e}), retrying with sudo")

    command = [*ELEVATION_PREFIX, "mkdir", "-p", str(path)]
    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise TransferFailed(f"Cannot run {command[0]}: {e}") from e
    except subprocess.CalledProcessError as e:
        raise TransferFailed(
            f"Cannot create directory {path} with sudo",
            returncode=e.returncode,
            stderr=e.stderr or "",
        ) from e
    logger.debug(f"Directory created with sudo: {path}")
