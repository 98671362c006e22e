"""Filesystem operations for library placement."""

from plexmove.filesystem.paths import (
    validate_within,
    is_within,
)
from plexmove.filesystem.discovery import (
    is_video,
    is_subtitle,
    is_sample,
    walk_files,
    find_principal_video,
    find_all_videos,
    find_subtitles,
    find_subtitles_for_video,
    find_remaining_entries,
)
from plexmove.filesystem.file_ops import ensure_directory
from plexmove.filesystem.cleanup import (
    remove_moved_files,
    purge_source,
)

__all__ = [
    "validate_within",
    "is_within",
    "is_video",
    "is_subtitle",
    "is_sample",
    "walk_files",
    "find_principal_video",
    "find_all_videos",
    "find_subtitles",
    "find_subtitles_for_video",
    "find_remaining_entries",
    "ensure_directory",
    "remove_moved_files",
    "purge_source",
]
