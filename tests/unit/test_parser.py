"""Tests for rsync progress output parsing."""

import io

import pytest

from plexmove.transfer.parser import (
    RsyncProgress,
    iter_stream_lines,
    parse_human_size,
    parse_progress_line,
    split_lines,
)


class TestParseHumanSize:
    """Tests for parse_human_size function."""

    @pytest.mark.parametrize("value,suffix,expected", [
        ("1,234,567", "", 1234567),
        ("512", "", 512),
        ("1.5", "K", 1536),
        ("2", "M", 2 * 1024 ** 2),
        ("5.70", "G", int(5.70 * 1024 ** 3)),
        ("1,50", "G", int(1.5 * 1024 ** 3)),
        ("1", "T", 1024 ** 4),
    ])
    def test_sizes(self, value, suffix, expected):
        """Converts rsync sizes to bytes."""
        assert parse_human_size(value, suffix) == expected


class TestParseProgressLine:
    """Tests for parse_progress_line function."""

    def test_human_readable_line(self):
        """Parses a -h progress2 line."""
        result = parse_progress_line("          5.70G  86%   10.12MB/s    0:00:45")
        assert result == RsyncProgress(
            bytes_copied=int(5.70 * 1024 ** 3),
            percent=86,
            rate="10.12MB/s",
            eta="0:00:45",
        )

    def test_raw_byte_line(self):
        """Parses a line with thousands separators."""
        result = parse_progress_line("    32,768 100%   31.25MB/s    0:00:00 (xfr#1, to-chk=0/1)")
        assert result.bytes_copied == 32768
        assert result.percent == 100
        assert result.eta == "0:00:00"

    def test_missing_rate_and_eta(self):
        """Rate and ETA are optional."""
        result = parse_progress_line("1.00M 50%")
        assert result.bytes_copied == 1024 ** 2
        assert result.rate == ""
        assert result.eta == ""

    @pytest.mark.parametrize("line", [
        "sending incremental file list",
        "Movie.2021.mkv",
        "sent 1.23G bytes  received 35 bytes  2.46M bytes/sec",
        "total size is 1.23G  speedup is 1.00",
        "",
    ])
    def test_non_progress_lines(self, line):
        """Lines without progress give None."""
        assert parse_progress_line(line) is None


class TestSplitLines:
    """Tests for split_lines function."""

    def test_carriage_returns(self):
        """Carriage returns separate progress updates."""
        chunks = [b"  1  10%\r  2  20%\r", b"  3  30%\n"]
        assert list(split_lines(chunks)) == ["  1  10%", "  2  20%", "  3  30%"]

    def test_crlf(self):
        """CRLF counts as a single break."""
        assert list(split_lines([b"a\r\nb\r\n"])) == ["a", "b"]

    def test_line_split_across_chunks(self):
        """A line split over two reads is reassembled."""
        assert list(split_lines([b"  1.0", b"0M  5%\r"])) == ["  1.00M  5%"]

    def test_trailing_line_without_terminator(self):
        """The last unterminated line is yielded at the end."""
        assert list(split_lines([b"first\nlast"])) == ["first", "last"]

    def test_invalid_utf8(self):
        """Undecodable bytes are replaced."""
        assert list(split_lines([b"caf\xe9\n"])) == ["caf�"]


class TestIterStreamLines:
    """Tests for iter_stream_lines function."""

    def test_reads_buffered_stream(self):
        """Yields lines from a binary stream."""
        stream = io.BufferedReader(io.BytesIO(b"one\rtwo\nthree"))
        assert list(iter_stream_lines(stream)) == ["one", "two", "three"]
