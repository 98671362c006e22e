"""Move request, outcome and progress data model."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from plexmove.models.media import Classification, MediaKind


@dataclass(frozen=True)
class MoveRequest:
    """
    One move of a finished download into the library.

    Attributes:
        source_path: File or directory to relocate.
        classification: Detection result, possibly user-corrected.
        cleanup_after_move: Remove moved files from the source afterwards.
        use_elevated_copy: Run the copy tool through sudo.
        rename_episodes: Rename TV episodes to "Show - SxxEyy" instead of
            keeping the original filename.
    """

    source_path: Path
    classification: Classification
    cleanup_after_move: bool = False
    use_elevated_copy: bool = False
    rename_episodes: bool = False


@dataclass
class MoveOutcome:
    """Result of a successful move. Never produced on failure."""

    moved_video_paths: List[Path] = field(default_factory=list)
    destination_root: Path = field(default_factory=Path)
    media_kind: MediaKind = MediaKind.UNKNOWN
    total_bytes: int = 0
    files_moved: int = 0
    remaining_source_entries: List[str] = field(default_factory=list)
    source_dir: Path = field(default_factory=Path)
    source_is_directory: bool = False
    moved_subtitle_paths: List[Path] = field(default_factory=list)
    cleanup_performed: bool = False


@dataclass(frozen=True)
class ProgressEvent:
    """
    Transfer progress snapshot.

    Attributes:
        bytes_copied: Bytes copied across the whole request.
        total_bytes: Bytes to copy across the whole request.
        overall_fraction: Aggregate progress in [0, 1].
        current_file: Name of the file being copied.
        rate: Transfer rate as displayed by the copy tool.
        eta_display: Remaining time as displayed by the copy tool.
        file_index: 1-based index in a multi-file move, 0 for single-file moves.
        file_count: Number of video files in the request.
        file_fraction: Progress of the current file in [0, 1].
    """

    bytes_copied: int = 0
    total_bytes: int = 0
    overall_fraction: float = 0.0
    current_file: str = ''
    rate: str = ''
    eta_display: str = ''
    file_index: int = 0
    file_count: int = 1
    file_fraction: float = 0.0
