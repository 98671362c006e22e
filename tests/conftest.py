"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

from plexmove.config.library import LibraryRoots

FAKE_RSYNC = Path(__file__).parent / "fixtures" / "fake_rsync.py"


@pytest.fixture
def fake_copy_command():
    """Command running the fake rsync with the current interpreter."""
    return (sys.executable, str(FAKE_RSYNC))


@pytest.fixture
def library_roots(tmp_path):
    """Empty movie and TV libraries."""
    movies = tmp_path / "library" / "Movies"
    tv = tmp_path / "library" / "TV"
    movies.mkdir(parents=True)
    tv.mkdir(parents=True)
    return LibraryRoots(movie_path=movies, tv_path=tv)


@pytest.fixture
def downloads(tmp_path):
    """Download directory."""
    path = tmp_path / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def make_file():
    """Factory writing a file of a given size, creating parents."""
    def _make(path: Path, size: int = 1024) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path
    return _make


@pytest.fixture
def sample_release_names():
    """Release names with their expected detection."""
    return [
        "The.Matrix.1999.MULTi.1080p.BluRay.x264-GROUP.mkv",
        "Breaking.Bad.S01E01.720p.WEB-DL.x265.mkv",
        "Inception.2010.FRENCH.BDRip.x264.mkv",
        "Game.of.Thrones.S08E06.VOSTFR.1080p.HDTV.mkv",
        "Show.Name.3x04.HDTV.avi",
    ]
