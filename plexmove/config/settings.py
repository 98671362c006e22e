"""Configuration settings and constants for the plexmove package."""

from typing import FrozenSet, Tuple

# Video file extensions (lowercase, with dot)
VIDEO_EXTENSIONS: FrozenSet[str] = frozenset({
    ".mkv", ".mp4", ".m4v", ".avi", ".mov", ".wmv", ".ts", ".mpg", ".mpeg", ".flv",
})

SUBTITLE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".srt", ".ass", ".ssa", ".sub", ".idx", ".vtt",
})

# Files whose name contains this marker are never treated as content
SAMPLE_MARKER: str = "sample"

# Depth limits for source scanning (1 = immediate entries only)
PRINCIPAL_VIDEO_MAX_DEPTH: int = 1
SEASON_PACK_MAX_DEPTH: int = 2

# Year range accepted by the movie heuristic
MIN_YEAR: int = 1900
MAX_YEAR: int = 2099

# Classifier confidence levels
CONFIDENCE_SXXEXX: float = 0.9
CONFIDENCE_NXNN: float = 0.75
CONFIDENCE_MOVIE: float = 0.8
CONFIDENCE_UNKNOWN: float = 0.1

# External copy tool
DEFAULT_COPY_COMMAND: Tuple[str, ...] = ("rsync",)
ELEVATION_PREFIX: Tuple[str, ...] = ("sudo", "-n")
RSYNC_PROGRESS_ARGS: Tuple[str, ...] = (
    "-avh", "--info=progress2", "--no-inc-recursive", "--partial", "--inplace", "--mkpath",
)
RSYNC_ONESHOT_ARGS: Tuple[str, ...] = ("-avh", "--inplace", "--mkpath")

# Seconds between cancellation checks while the copy tool runs
CANCEL_POLL_INTERVAL: float = 0.1

# Seconds to wait after SIGTERM before killing the copy tool
TERMINATE_GRACE_SECONDS: float = 5.0

# Bounded progress queue size used by the command-line front end
PROGRESS_QUEUE_SIZE: int = 10

# Environment variables holding the library roots
ENV_MOVIE_LIBRARY: str = "PLEXMOVE_MOVIE_LIBRARY"
ENV_TV_LIBRARY: str = "PLEXMOVE_TV_LIBRARY"
