"""Parsing of rsync --info=progress2 output.

rsync rewrites a single terminal line with carriage returns, so the
output is split on CR as well as LF. A progress line looks like:

    "  5.70G  86%   10.12MB/s    0:00:45"
"""

import re
from dataclasses import dataclass
from typing import BinaryIO, Generator, Iterable, Optional

# Size at line start followed by the percentage
_PROGRESS_PATTERN = re.compile(r'^\s*([\d.,]+)([KMGT]?)\s+(\d+)%')
_RATE_PATTERN = re.compile(r'([\d.,]+[KMGT]?B/s)')
_ETA_PATTERN = re.compile(r'(\d+:\d{2}:\d{2})')
_LINE_BREAK = re.compile(rb'\r\n|\r|\n')

_UNIT_EXPONENTS = {'': 0, 'K': 1, 'M': 2, 'G': 3, 'T': 4}

READ_CHUNK_SIZE = 4096


@dataclass(frozen=True)
class RsyncProgress:
    """One parsed progress line."""

    bytes_copied: int
    percent: int
    rate: str = ''
    eta: str = ''


def parse_human_size(value: str, suffix: str = '') -> int:
    """
    Convert an rsync size to bytes.

    Without a suffix rsync prints thousands separators ("1,234,567");
    with -h the number is scaled by 1024 per K/M/G/T step.

    Args:
        value: Numeric part.
        suffix: One of "", "K", "M", "G", "T".

    Returns:
        Size in bytes.

    Examples:
        >>> parse_human_size("1.5", "K")
        1536
        >>> parse_human_size("1,234,567")
        1234567
    """
    if suffix:
        number = float(value.replace(',', '.'))
    else:
        number = float(value.replace(',', ''))
    return int(number * 1024 ** _UNIT_EXPONENTS[suffix])


def parse_progress_line(line: str) -> Optional[RsyncProgress]:
    """
    Parse a progress line.

    Args:
        line: One output line without its terminator.

    Returns:
        RsyncProgress, or None for lines that carry no progress
        (file names, transfer summary).
    """
    match = _PROGRESS_PATTERN.match(line)
    if not match:
        return None

    try:
        copied = parse_human_size(match.group(1), match.group(2))
    except ValueError:
        return None

    rate_match = _RATE_PATTERN.search(line, match.end())
    eta_match = _ETA_PATTERN.search(line, match.end())

    return RsyncProgress(
        bytes_copied=copied,
        percent=int(match.group(3)),
        rate=rate_match.group(1) if rate_match else '',
        eta=eta_match.group(1) if eta_match else '',
    )


def split_lines(chunks: Iterable[bytes]) -> Generator[str, None, None]:
    """
    Split a byte stream into lines on CR, LF or CRLF.

    Empty lines are skipped. A trailing unterminated line is yielded
    once the stream ends.

    Args:
        chunks: Raw output chunks.

    Yields:
        Decoded lines.
    """
    buffer = b''
    for chunk in chunks:
        buffer += chunk
        *lines, buffer = _LINE_BREAK.split(buffer)
        for line in lines:
            if line:
                yield line.decode('utf-8', errors='replace')
    if buffer:
        yield buffer.decode('utf-8', errors='replace')


def iter_stream_lines(stream: BinaryIO) -> Generator[str, None, None]:
    """Read a binary stream incrementally and yield its lines."""
    read = getattr(stream, 'read1', stream.read)
    yield from split_lines(iter(lambda: read(READ_CHUNK_SIZE), b''))
