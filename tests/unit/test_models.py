"""Tests for data models."""

import dataclasses
from pathlib import Path

import pytest

from plexmove.models import Classification, MediaKind, MoveOutcome, MoveRequest, ProgressEvent


class TestMediaKind:
    """Tests for MediaKind enum."""

    def test_labels(self):
        """Each kind has a display label."""
        assert MediaKind.MOVIE.label == "Movie"
        assert MediaKind.TV_EPISODE.label == "TV Show"
        assert MediaKind.UNKNOWN.label == "Unknown"


class TestClassification:
    """Tests for Classification class."""

    def test_defaults(self):
        """An empty classification is unknown."""
        result = Classification()
        assert result.is_unknown()
        assert result.season == 0
        assert result.year is None

    def test_with_overrides(self):
        """Overrides return a corrected copy."""
        original = Classification(kind=MediaKind.UNKNOWN, title="raw name")
        corrected = original.with_overrides(title="Real Title", kind=MediaKind.MOVIE, year=2021)
        assert corrected.is_movie()
        assert corrected.title == "Real Title"
        assert corrected.year == 2021
        assert original.title == "raw name"

    def test_overrides_ignore_none(self):
        """None leaves fields untouched."""
        original = Classification(kind=MediaKind.TV_EPISODE, title="Show", season=2)
        assert original.with_overrides() == original

    def test_frozen(self):
        """Classifications are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Classification().title = "x"


class TestMoveModels:
    """Tests for move request and outcome models."""

    def test_request_defaults(self):
        """No cleanup, elevation or renaming by default."""
        request = MoveRequest(Path("/d/x.mkv"), Classification())
        assert not request.cleanup_after_move
        assert not request.use_elevated_copy
        assert not request.rename_episodes

    def test_outcome_defaults(self):
        """Outcome lists are independent."""
        first, second = MoveOutcome(), MoveOutcome()
        first.remaining_source_entries.append("x")
        assert second.remaining_source_entries == []

    def test_progress_event_defaults(self):
        """A fresh event reports nothing copied."""
        event = ProgressEvent()
        assert event.overall_fraction == 0.0
        assert event.file_index == 0
        assert event.file_count == 1
