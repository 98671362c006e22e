"""Tests for command-line argument parsing."""

from pathlib import Path

import pytest

from plexmove.config.cli import CLIArgs, args_to_cli_args, create_parser, parse_arguments
from plexmove.models.media import MediaKind


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_defaults(self):
        """Only the source is required."""
        cli_args = args_to_cli_args(parse_arguments(["/downloads/Movie.2021"]))
        assert cli_args == CLIArgs(source=Path("/downloads/Movie.2021"))

    def test_all_options(self):
        """Every option reaches CLIArgs."""
        namespace = parse_arguments([
            "src", "--movies", "/m", "--tv", "/t", "-t", "tv", "--title", "Show",
            "--year", "2020", "--season", "2", "-c", "--sudo", "--rename",
            "--timeout", "60", "-y", "--debug",
        ])
        cli_args = args_to_cli_args(namespace)
        assert cli_args.movie_library == "/m"
        assert cli_args.tv_library == "/t"
        assert cli_args.kind is MediaKind.TV_EPISODE
        assert cli_args.title == "Show"
        assert cli_args.year == 2020
        assert cli_args.season == 2
        assert cli_args.cleanup is True
        assert cli_args.sudo is True
        assert cli_args.rename is True
        assert cli_args.timeout == 60.0
        assert cli_args.assume_yes is True
        assert cli_args.debug is True

    def test_movie_type(self):
        """-t movie forces a movie."""
        assert args_to_cli_args(parse_arguments(["src", "-t", "movie"])).kind is MediaKind.MOVIE

    def test_cleanup_and_purge_exclusive(self):
        """--cleanup and --purge cannot be combined."""
        with pytest.raises(SystemExit):
            parse_arguments(["src", "--cleanup", "--purge"])

    def test_invalid_type(self):
        """Unknown media types are rejected."""
        with pytest.raises(SystemExit):
            parse_arguments(["src", "-t", "music"])

    def test_parser_prog(self):
        """The parser is named after the tool."""
        assert create_parser().prog == "plexmove"
