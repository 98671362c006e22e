"""Library path formatting for movies and TV episodes."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

from plexmove.exceptions import InvalidNamingInput
from plexmove.naming.sanitizer import sanitize_filename


@dataclass(frozen=True)
class MovieNaming:
    """Movie information used to build a library filename."""

    title: str
    year: Optional[int] = None
    extension: str = ''


@dataclass(frozen=True)
class TVNaming:
    """TV episode information used to build a library path."""

    show_title: str
    season: int = 0
    episode: int = 0
    episode_title: str = ''
    extension: str = ''


def _require_title(title: str, what: str) -> str:
    safe = sanitize_filename(title)
    if not safe:
        raise InvalidNamingInput(f"Empty {what} title")
    return safe


def format_season_folder(season: int) -> str:
    """
    Format season number as folder name.

    Args:
        season: Season number (0 is the specials season).

    Returns:
        Formatted string like "Season 01".
    """
    return f"Season {season:02d}"


def format_movie_filename(title: str, year: Optional[int] = None, extension: str = '') -> str:
    """
    Build the movie filename placed directly under the movie library.

    Args:
        title: Movie title.
        year: Release year, or None/0 when unknown.
        extension: File extension including the dot.

    Returns:
        "Title (Year).ext", or "Title.ext" without a year.

    Raises:
        InvalidNamingInput: If the title is empty once sanitized.
    """
    safe_title = _require_title(title, "movie")
    if year:
        return f"{safe_title} ({year}){extension}"
    return f"{safe_title}{extension}"


def format_tv_directory(show_title: str, season: int) -> str:
    """
    Build the relative directory of a TV episode.

    The episode keeps its original filename inside this directory so
    its SxxEyy marker stays visible to the media server.

    Args:
        show_title: Show title.
        season: Season number.

    Returns:
        "Show/Season NN".

    Raises:
        InvalidNamingInput: If the show title is empty once sanitized.
    """
    safe_show = _require_title(show_title, "show")
    return str(PurePath(safe_show) / format_season_folder(season))


def format_tv_filename(
    show_title: str,
    season: int,
    episode: int,
    extension: str = '',
    episode_title: str = '',
) -> str:
    """
    Build an explicit episode filename.

    Args:
        show_title: Show title.
        season: Season number.
        episode: Episode number.
        extension: File extension including the dot.
        episode_title: Optional episode title.

    Returns:
        "Show - S01E02 - Episode Title.ext" (title part optional).

    Raises:
        InvalidNamingInput: If the show title is empty once sanitized.
    """
    safe_show = _require_title(show_title, "show")
    parts = [safe_show, f"S{season:02d}E{episode:02d}"]

    safe_episode_title = sanitize_filename(episode_title)
    if safe_episode_title:
        parts.append(safe_episode_title)

    return " - ".join(parts) + extension


def format_subtitle_filename(subtitle_name: str, video_stem: str, new_video_stem: str) -> str:
    """
    Name a subtitle after the renamed video it belongs to.

    A subtitle named after the original video keeps its language tail
    ("Movie.2021.en.srt" -> "Movie (2021).en.srt"). Any other subtitle
    gets the new video name as prefix ("English.srt" ->
    "Movie (2021).English.srt") so subtitles from different downloads
    never collide in a shared folder.

    Args:
        subtitle_name: Subtitle filename.
        video_stem: Original video filename without extension.
        new_video_stem: Library video filename without extension.

    Returns:
        Subtitle filename for the library.
    """
    if subtitle_name.lower().startswith(video_stem.lower()):
        return new_video_stem + subtitle_name[len(video_stem):]
    return f"{new_video_stem}.{subtitle_name}"


def format_movie_path(naming: MovieNaming) -> str:
    """Relative library path of a movie (the filename itself)."""
    return format_movie_filename(naming.title, naming.year, naming.extension)


def format_tv_path(naming: TVNaming) -> str:
    """Relative library path of a renamed episode: "Show/Season NN/Show - SxxEyy.ext"."""
    directory = format_tv_directory(naming.show_title, naming.season)
    filename = format_tv_filename(
        naming.show_title,
        naming.season,
        naming.episode,
        naming.extension,
        naming.episode_title,
    )
    return str(PurePath(directory) / filename)
