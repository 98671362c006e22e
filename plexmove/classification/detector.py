"""Media type detection from filenames and paths."""

from pathlib import Path
from typing import Callable, List, Optional, Union

from loguru import logger

from plexmove.classification.patterns import (
    extract_movie_year,
    extract_nxnn,
    extract_sxxexx,
)
from plexmove.classification.text_processing import base_name, clean_title
from plexmove.config.settings import CONFIDENCE_UNKNOWN
from plexmove.exceptions import DetectionFailed
from plexmove.models.media import Classification, MediaKind

Extractor = Callable[[str], Optional[Classification]]

# Ordered: episode markers are more specific than years
EXTRACTORS: List[Extractor] = [
    extract_sxxexx,
    extract_nxnn,
    extract_movie_year,
]


def classify(name: Union[str, Path]) -> Classification:
    """
    Classify a filename or path as movie, TV episode or unknown.

    Never fails: unrecognized names yield MediaKind.UNKNOWN with the
    cleaned name as title and a low confidence.

    Args:
        name: Filename, directory name or full path.

    Returns:
        Classification from the first matching extractor.
    """
    stem = base_name(str(name))

    for extractor in EXTRACTORS:
        result = extractor(stem)
        if result is not None:
            return result

    return Classification(
        kind=MediaKind.UNKNOWN,
        title=clean_title(stem),
        confidence=CONFIDENCE_UNKNOWN,
    )


def classify_path(path: Union[str, Path]) -> Classification:
    """
    Classify using the innermost directory name, then the filename.

    The directory often carries the real title when the file itself
    has a generic name. For a directory the innermost directory is the
    path itself. A filename with an episode marker, or any filename
    scoring higher than its directory, still wins: a loose episode in
    "Downloads 2023" is not the movie "Downloads".

    Args:
        path: Path to a file or directory.

    Returns:
        First non-unknown classification, or the filename's result.
    """
    path = Path(path)
    is_dir = path.is_dir()
    directory = path if is_dir else path.parent
    from_file = None if is_dir else classify(path.name)

    if directory.name:
        result = classify(directory.name)
        if not result.is_unknown():
            if from_file is not None and (
                from_file.is_tv() or from_file.confidence > result.confidence
            ):
                logger.debug(f"Filename '{path.name}' overrides directory '{directory.name}'")
                return from_file
            logger.debug(f"Detected from directory '{directory.name}': {result.kind.label}")
            return result

    return from_file if from_file is not None else classify(path.name)


def detect(name: Union[str, Path]) -> Classification:
    """
    Strict variant of classify().

    Raises:
        DetectionFailed: When the kind is unknown. The best-effort
            classification is attached to the exception.
    """
    result = classify(name)
    if result.is_unknown():
        raise DetectionFailed(f"Unable to detect media type of {name}", result)
    return result


def detect_from_path(path: Union[str, Path]) -> Classification:
    """
    Strict variant of classify_path().

    Raises:
        DetectionFailed: When the kind is unknown.
    """
    result = classify_path(path)
    if result.is_unknown():
        raise DetectionFailed(f"Unable to detect media type of {path}", result)
    return result
