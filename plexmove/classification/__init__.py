"""Media type detection and title extraction."""

from plexmove.classification.text_processing import (
    base_name,
    clean_title,
)
from plexmove.classification.patterns import (
    extract_sxxexx,
    extract_nxnn,
    extract_movie_year,
)
from plexmove.classification.detector import (
    EXTRACTORS,
    classify,
    classify_path,
    detect,
    detect_from_path,
)
from plexmove.classification.release_info import (
    ReleaseInfo,
    extract_release_info,
)

__all__ = [
    "base_name",
    "clean_title",
    "extract_sxxexx",
    "extract_nxnn",
    "extract_movie_year",
    "EXTRACTORS",
    "classify",
    "classify_path",
    "detect",
    "detect_from_path",
    "ReleaseInfo",
    "extract_release_info",
]
