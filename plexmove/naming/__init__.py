"""Canonical library naming."""

from plexmove.naming.sanitizer import sanitize_filename
from plexmove.naming.formatter import (
    MovieNaming,
    TVNaming,
    format_season_folder,
    format_movie_filename,
    format_tv_directory,
    format_tv_filename,
    format_subtitle_filename,
    format_movie_path,
    format_tv_path,
)

__all__ = [
    "sanitize_filename",
    "MovieNaming",
    "TVNaming",
    "format_season_folder",
    "format_movie_filename",
    "format_tv_directory",
    "format_tv_filename",
    "format_subtitle_filename",
    "format_movie_path",
    "format_tv_path",
]
