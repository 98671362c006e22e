"""Aggregate progress accounting for multi-file transfers."""

import queue
from typing import Optional

from loguru import logger

from plexmove.models.move import ProgressEvent
from plexmove.transfer.parser import RsyncProgress


def offer(sink: Optional["queue.Queue[ProgressEvent]"], event: Optional[ProgressEvent]) -> bool:
    """
    Hand an event to the progress queue without ever blocking.

    Progress is lossy telemetry: when the consumer is behind and the
    queue is full, the event is dropped.

    Args:
        sink: Bounded queue drained by the caller, or None.
        event: Event to send, or None (nothing to send).

    Returns:
        True if the event was queued.
    """
    if sink is None or event is None:
        return False
    try:
        sink.put_nowait(event)
    except queue.Full:
        logger.trace("Progress queue full, event dropped")
        return False
    return True


class ProgressTracker:
    """
    Turns per-file copy-tool progress into request-wide ProgressEvents.

    Bytes of finished files are carried as an offset so the overall
    fraction keeps growing from one file to the next. The overall
    fraction never decreases and 1.0 is reported only once.
    """

    def __init__(self, total_bytes: int, file_count: int) -> None:
        self.total_bytes = max(total_bytes, 0)
        self.file_count = file_count
        self._offset = 0
        self._index = 0
        self._file_name = ''
        self._file_size = 0
        self._file_done = False
        self._last_bytes = 0
        self._last_fraction = 0.0
        self._reported_complete = False

    @property
    def overall_fraction(self) -> float:
        """Last reported overall fraction."""
        return self._last_fraction

    def start_file(self, index: int, name: str, size: int) -> None:
        """
        Begin accounting for the next file.

        Args:
            index: 1-based position of the file in the request.
            name: Display name.
            size: File size in bytes.
        """
        self._index = index
        self._file_name = name
        self._file_size = max(size, 0)
        self._file_done = False

    def update(self, progress: RsyncProgress) -> Optional[ProgressEvent]:
        """
        Account for one parsed progress line of the current file.

        The byte count is clamped to the file size since the copy tool
        can briefly over-report.

        Returns:
            Event to emit, or None if it would repeat the completion.
        """
        copied = min(max(progress.bytes_copied, 0), self._file_size)
        percent = min(max(progress.percent, 0), 100)
        if percent >= 100:
            copied = self._file_size
        return self._event(copied, percent / 100.0, progress.rate, progress.eta)

    def finish_file(self) -> Optional[ProgressEvent]:
        """
        Close the current file and move its size into the offset.

        Returns:
            A completion event if the copy tool did not already report
            the file as complete, else None.
        """
        event = None
        if not self._file_done:
            event = self._event(self._file_size, 1.0, '', '')
        self._offset += self._file_size
        self._file_done = False
        return event

    def _event(self, file_copied: int, percent_fraction: float, rate: str, eta: str) -> Optional[ProgressEvent]:
        if self._file_size:
            file_fraction = file_copied / self._file_size
        else:
            file_fraction = percent_fraction
        file_fraction = min(max(file_fraction, 0.0), 1.0)
        if file_fraction >= 1.0:
            self._file_done = True

        overall_bytes = min(self._offset + file_copied, self.total_bytes)
        overall_bytes = max(overall_bytes, self._last_bytes)

        if self.total_bytes:
            fraction = overall_bytes / self.total_bytes
        elif self._index >= self.file_count:
            fraction = file_fraction
        else:
            fraction = 0.0
        fraction = max(min(fraction, 1.0), self._last_fraction)

        if fraction >= 1.0:
            if self._reported_complete:
                return None
            self._reported_complete = True

        self._last_bytes = overall_bytes
        self._last_fraction = fraction

        return ProgressEvent(
            bytes_copied=overall_bytes,
            total_bytes=self.total_bytes,
            overall_fraction=fraction,
            current_file=self._file_name,
            rate=rate,
            eta_display=eta,
            file_index=self._index if self.file_count > 1 else 0,
            file_count=self.file_count,
            file_fraction=file_fraction,
        )
