"""Tests for video and subtitle discovery."""

import pytest

from plexmove.exceptions import NoVideoFound, SourceNotFound
from plexmove.filesystem.discovery import (
    find_all_videos,
    find_principal_video,
    find_remaining_entries,
    find_subtitles,
    find_subtitles_for_video,
    is_sample,
    is_subtitle,
    is_video,
    walk_files,
)


class TestPredicates:
    """Tests for file type predicates."""

    def test_is_video(self, tmp_path):
        """Recognizes video extensions regardless of case."""
        assert is_video(tmp_path / "a.mkv")
        assert is_video(tmp_path / "a.MP4")
        assert not is_video(tmp_path / "a.srt")

    def test_is_subtitle(self, tmp_path):
        """Recognizes subtitle extensions."""
        assert is_subtitle(tmp_path / "a.en.srt")
        assert is_subtitle(tmp_path / "a.ASS")
        assert not is_subtitle(tmp_path / "a.nfo")

    def test_is_sample(self, tmp_path):
        """Detects the sample marker anywhere in the name."""
        assert is_sample(tmp_path / "movie-SAMPLE.mkv")
        assert not is_sample(tmp_path / "movie.mkv")


class TestWalkFiles:
    """Tests for walk_files function."""

    def test_depth_one(self, tmp_path, make_file):
        """Depth 1 only yields immediate files."""
        make_file(tmp_path / "a.mkv")
        make_file(tmp_path / "sub" / "b.mkv")
        assert [p.name for p in walk_files(tmp_path, 1)] == ["a.mkv"]

    def test_depth_two(self, tmp_path, make_file):
        """Depth 2 includes files of subdirectories."""
        make_file(tmp_path / "a.mkv")
        make_file(tmp_path / "sub" / "b.mkv")
        make_file(tmp_path / "sub" / "deeper" / "c.mkv")
        assert sorted(p.name for p in walk_files(tmp_path, 2)) == ["a.mkv", "b.mkv"]

    def test_missing_directory(self, tmp_path):
        """An unreadable directory yields nothing."""
        assert list(walk_files(tmp_path / "missing", 2)) == []


class TestFindPrincipalVideo:
    """Tests for find_principal_video function."""

    def test_file_source(self, tmp_path, make_file):
        """A video file is its own principal video."""
        video = make_file(tmp_path / "movie.mkv")
        assert find_principal_video(video) == video

    def test_largest_wins(self, tmp_path, make_file):
        """The largest immediate video is chosen."""
        make_file(tmp_path / "small.mkv", 10)
        big = make_file(tmp_path / "big.mkv", 100)
        assert find_principal_video(tmp_path) == big

    def test_sample_excluded_even_if_largest(self, tmp_path, make_file):
        """Sample clips are never chosen."""
        movie = make_file(tmp_path / "movie.mkv", 10)
        make_file(tmp_path / "movie-sample.mkv", 1000)
        assert find_principal_video(tmp_path) == movie

    def test_only_immediate_entries(self, tmp_path, make_file):
        """Videos in subdirectories are ignored."""
        make_file(tmp_path / "extras" / "bonus.mkv", 1000)
        with pytest.raises(NoVideoFound):
            find_principal_video(tmp_path)

    def test_missing_source(self, tmp_path):
        """Raises SourceNotFound for a missing path."""
        with pytest.raises(SourceNotFound):
            find_principal_video(tmp_path / "missing")

    def test_non_video_file(self, tmp_path, make_file):
        """Raises NoVideoFound for a non-video file."""
        with pytest.raises(NoVideoFound):
            find_principal_video(make_file(tmp_path / "readme.nfo"))

    def test_no_video_lists_contents(self, tmp_path, make_file):
        """The error lists what was found instead."""
        make_file(tmp_path / "readme.nfo")
        with pytest.raises(NoVideoFound, match="readme.nfo"):
            find_principal_video(tmp_path)


class TestFindAllVideos:
    """Tests for find_all_videos function."""

    def test_sorted_episodes(self, tmp_path, make_file):
        """Returns every episode sorted by path."""
        make_file(tmp_path / "Show.S01E02.mkv")
        make_file(tmp_path / "Show.S01E01.mkv")
        result = find_all_videos(tmp_path)
        assert [p.name for p in result] == ["Show.S01E01.mkv", "Show.S01E02.mkv"]

    def test_two_levels(self, tmp_path, make_file):
        """Scans one level of subdirectories."""
        make_file(tmp_path / "Disc1" / "Show.S01E01.mkv")
        make_file(tmp_path / "Disc1" / "more" / "Show.S01E09.mkv")
        assert [p.name for p in find_all_videos(tmp_path)] == ["Show.S01E01.mkv"]

    def test_samples_excluded(self, tmp_path, make_file):
        """Sample files are skipped."""
        make_file(tmp_path / "Show.S01E01.mkv")
        make_file(tmp_path / "Sample" / "show.sample.mkv")
        assert len(find_all_videos(tmp_path)) == 1

    def test_single_file(self, tmp_path, make_file):
        """A video file yields itself."""
        video = make_file(tmp_path / "Show.S01E01.mkv")
        assert find_all_videos(video) == [video]

    def test_empty_directory(self, tmp_path):
        """Raises NoVideoFound without videos."""
        with pytest.raises(NoVideoFound):
            find_all_videos(tmp_path)


class TestFindSubtitles:
    """Tests for subtitle discovery."""

    def test_directory_source(self, tmp_path, make_file):
        """Finds subtitles up to two levels deep."""
        make_file(tmp_path / "movie.en.srt")
        make_file(tmp_path / "Subs" / "movie.fr.srt")
        make_file(tmp_path / "movie.nfo")
        names = [p.name for p in find_subtitles(tmp_path)]
        assert names == ["movie.en.srt", "movie.fr.srt"]

    def test_file_source_scans_parent(self, tmp_path, make_file):
        """For a file, the parent directory is scanned."""
        video = make_file(tmp_path / "movie.mkv")
        make_file(tmp_path / "movie.srt")
        assert [p.name for p in find_subtitles(video)] == ["movie.srt"]

    def test_missing_source(self, tmp_path):
        """A missing source has no subtitles."""
        assert find_subtitles(tmp_path / "missing") == []

    def test_for_video_prefix(self, tmp_path, make_file):
        """Only subtitles named after the video belong to it."""
        video = make_file(tmp_path / "Show.S01E01.mkv")
        make_file(tmp_path / "show.s01e01.en.srt")
        make_file(tmp_path / "Show.S01E02.en.srt")
        names = [p.name for p in find_subtitles_for_video(tmp_path, video)]
        assert names == ["show.s01e01.en.srt"]

    def test_for_video_depth_one(self, tmp_path, make_file):
        """Depth 1 ignores subtitles in neighbouring download folders."""
        video = make_file(tmp_path / "Heat.1995.mkv")
        make_file(tmp_path / "Heat.1995.en.srt")
        make_file(tmp_path / "Heat.1995.Extended" / "Heat.1995.Extended.en.srt")
        names = [p.name for p in find_subtitles_for_video(tmp_path, video, max_depth=1)]
        assert names == ["Heat.1995.en.srt"]

    def test_for_video_missing_dir(self, tmp_path):
        """A missing directory gives no subtitles."""
        assert find_subtitles_for_video(tmp_path / "missing", tmp_path / "a.mkv") == []


class TestFindRemainingEntries:
    """Tests for find_remaining_entries function."""

    def test_lists_leftovers(self, tmp_path, make_file):
        """Moved files are excluded from the listing."""
        video = make_file(tmp_path / "movie.mkv")
        make_file(tmp_path / "movie.nfo")
        (tmp_path / "Screens").mkdir()
        assert find_remaining_entries(tmp_path, [video]) == ["Screens", "movie.nfo"]

    def test_missing_directory(self, tmp_path):
        """A removed directory has no leftovers."""
        assert find_remaining_entries(tmp_path / "gone", []) == []
