"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from plexmove.config.settings import ENV_MOVIE_LIBRARY, ENV_TV_LIBRARY
from plexmove.models.media import MediaKind

_KIND_CHOICES = {
    'movie': MediaKind.MOVIE,
    'tv': MediaKind.TV_EPISODE,
}


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        source: Finished download to move (file or directory).
        movie_library: Movie library root, or None to use the environment.
        tv_library: TV library root, or None to use the environment.
        kind: Forced media kind, or None to auto-detect.
        title: Title override.
        year: Year override (movies).
        season: Fallback season for season-less episodes.
        cleanup: Remove moved files from the source afterwards.
        purge: Remove the whole source once the move succeeded.
        sudo: Run the copy tool through sudo.
        rename: Rename TV episodes instead of keeping original names.
        timeout: Seconds before a copy is aborted (None for no deadline).
        assume_yes: Do not prompt before purging leftovers.
        debug: Enable debug logging.
    """

    source: Path = Path('.')
    movie_library: Optional[str] = None
    tv_library: Optional[str] = None
    kind: Optional[MediaKind] = None
    title: str = ""
    year: Optional[int] = None
    season: Optional[int] = None
    cleanup: bool = False
    purge: bool = False
    sudo: bool = False
    rename: bool = False
    timeout: Optional[float] = None
    assume_yes: bool = False
    debug: bool = False


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='plexmove',
        description="""
        Moves a finished download into a Plex-style movie or TV library,
        detecting the media type, title and season from its name.
        """
    )

    parser.add_argument(
        'source',
        help='file or directory to move'
    )

    parser.add_argument(
        '--movies',
        default=None,
        help=f"movie library root (default: ${ENV_MOVIE_LIBRARY})"
    )

    parser.add_argument(
        '--tv',
        default=None,
        help=f"TV library root (default: ${ENV_TV_LIBRARY})"
    )

    parser.add_argument(
        '-t', '--type',
        choices=sorted(_KIND_CHOICES),
        default=None,
        help='force media type instead of detecting it'
    )

    parser.add_argument(
        '--title',
        default='',
        help='override the detected title (show title for TV)'
    )

    parser.add_argument(
        '--year',
        type=int,
        default=None,
        help='override the detected year (movies)'
    )

    parser.add_argument(
        '--season',
        type=int,
        default=None,
        help='season used for episodes without SxxEyy in their name'
    )

    # Source handling is mutually exclusive
    source_group = parser.add_mutually_exclusive_group()

    source_group.add_argument(
        '-c', '--cleanup',
        action='store_true',
        help='delete moved videos and subtitles from the source'
    )

    source_group.add_argument(
        '--purge',
        action='store_true',
        help='delete the whole source after a successful move'
    )

    parser.add_argument(
        '--sudo',
        action='store_true',
        help='run the copy through sudo -n'
    )

    parser.add_argument(
        '--rename',
        action='store_true',
        help='rename episodes to "Show - S01E02 - Title.ext"'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='abort a copy that runs longer than TIMEOUT seconds'
    )

    parser.add_argument(
        '-y', '--yes',
        action='store_true',
        help="don't ask before purging leftover files"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        source=Path(namespace.source),
        movie_library=namespace.movies,
        tv_library=namespace.tv,
        kind=_KIND_CHOICES.get(namespace.type) if namespace.type else None,
        title=namespace.title or "",
        year=namespace.year,
        season=namespace.season,
        cleanup=namespace.cleanup,
        purge=namespace.purge,
        sudo=namespace.sudo,
        rename=namespace.rename,
        timeout=namespace.timeout,
        assume_yes=namespace.yes,
        debug=namespace.debug,
    )
