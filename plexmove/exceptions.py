"""Custom exceptions for classification, naming and library placement."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from plexmove.models.media import Classification


class PlexMoveError(Exception):
    """Base class for every error raised by the move engine."""

    pass


class LibraryConfigError(PlexMoveError):
    """Library roots are missing or do not point to directories."""

    pass


class DetectionFailed(PlexMoveError):
    """Movie vs. TV could not be determined from the name.

    The best-effort classification is kept so a caller can offer it
    to the user for a manual override.
    """

    def __init__(self, message: str, classification: Optional["Classification"] = None):
        super().__init__(message)
        self.classification = classification


class InvalidNamingInput(PlexMoveError):
    """A naming function received structurally invalid input (empty title)."""

    pass


class PathEscape(PlexMoveError):
    """A computed destination resolves outside its library root."""

    def __init__(self, candidate, root):
        super().__init__(f"Path {candidate} escapes allowed directory {root}")
        self.candidate = candidate
        self.root = root


class SourceNotFound(PlexMoveError):
    """The source file or directory does not exist."""

    pass


class NoVideoFound(PlexMoveError):
    """The source item contains no recognizable video file."""

    pass


class TransferFailed(PlexMoveError):
    """The copy process could not be started or exited non-zero."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class TransferCancelled(TransferFailed):
    """The copy was aborted through the cancel token or the deadline."""

    pass


class SubtitleCopyFailed(PlexMoveError):
    """A subtitle could not be copied. Never fails a move."""

    pass


class CleanupFailed(PlexMoveError):
    """Source cleanup failed after a successful move. Never fails a move."""

    pass


class MoveInProgress(PlexMoveError):
    """A Mover instance was asked to run two moves at once."""

    pass
