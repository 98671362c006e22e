"""Configuration and CLI handling."""

from plexmove.config.settings import (
    VIDEO_EXTENSIONS,
    SUBTITLE_EXTENSIONS,
    SAMPLE_MARKER,
    DEFAULT_COPY_COMMAND,
    PROGRESS_QUEUE_SIZE,
)
from plexmove.config.library import (
    LibraryRoots,
    resolve_library_roots,
    validate_library_roots,
)
from plexmove.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "SAMPLE_MARKER",
    "DEFAULT_COPY_COMMAND",
    "PROGRESS_QUEUE_SIZE",
    "LibraryRoots",
    "resolve_library_roots",
    "validate_library_roots",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
]
