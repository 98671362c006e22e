"""Sequential copy of video files with aggregated progress."""

import queue
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from plexmove.config.settings import (
    DEFAULT_COPY_COMMAND,
    ELEVATION_PREFIX,
    RSYNC_ONESHOT_ARGS,
    RSYNC_PROGRESS_ARGS,
)
from plexmove.exceptions import SubtitleCopyFailed, TransferCancelled, TransferFailed
from plexmove.filesystem.file_ops import ensure_directory
from plexmove.models.move import ProgressEvent
from plexmove.transfer.parser import parse_progress_line
from plexmove.transfer.process import CopyProcess
from plexmove.transfer.progress import ProgressTracker, offer


class TransferState(Enum):
    """Lifecycle of one video file copy."""

    IDLE = "idle"
    COPYING = "copying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class TransferJob:
    """
    One video file to copy, with the subtitles that follow it.

    Attributes:
        source: Video file in the download.
        destination: Final library path.
        size: Source size in bytes.
        subtitles: (source, destination) pairs copied after the video.
        state: Current transfer state.
    """

    source: Path
    destination: Path
    size: int = 0
    subtitles: List[Tuple[Path, Path]] = field(default_factory=list)
    state: TransferState = TransferState.IDLE


class TransferOrchestrator:
    """
    Copies a list of video files one after the other.

    Files are never copied in parallel: the byte offset of finished
    files is carried forward so the overall progress stays monotone
    across the whole request.
    """

    def __init__(
        self,
        copy_command: Sequence[str] = DEFAULT_COPY_COMMAND,
        elevated: bool = False,
        progress: Optional["queue.Queue[ProgressEvent]"] = None,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Args:
            copy_command: rsync-compatible executable (and leading args).
            elevated: Prefix copies with "sudo -n".
            progress: Bounded queue receiving ProgressEvents (drop on full).
            cancel_event: Set by the caller to abort the transfer.
            timeout: Seconds allowed for the whole transfer, None for no limit.
        """
        self.copy_command = tuple(copy_command)
        self.elevated = elevated
        self.progress = progress
        self.cancel_event = cancel_event
        self.timeout = timeout

    def build_command(self, source: Path, destination: Path, oneshot: bool = False) -> List[str]:
        """
        Build the copy command line.

        Args:
            source: File to copy.
            destination: Destination file path.
            oneshot: Use the simple mode without progress output.

        Returns:
            Full argument list.
        """
        args = RSYNC_ONESHOT_ARGS if oneshot else RSYNC_PROGRESS_ARGS
        command = [*self.copy_command, *args, str(source), str(destination)]
        if self.elevated:
            command = [*ELEVATION_PREFIX, *command]
        return command

    def run(self, jobs: List[TransferJob]) -> List[Path]:
        """
        Copy every job in order, then its subtitles.

        Args:
            jobs: Files to copy.

        Returns:
            Destination paths of the subtitles that were copied.

        Raises:
            TransferFailed: On the first video that fails; later jobs
                stay IDLE.
            TransferCancelled: If the cancel token or deadline fires.
        """
        deadline = time.monotonic() + self.timeout if self.timeout is not None else None
        total_bytes = sum(job.size for job in jobs)
        tracker = ProgressTracker(total_bytes, len(jobs))
        copied_subtitles: List[Path] = []

        for index, job in enumerate(jobs, start=1):
            tracker.start_file(index, job.source.name, job.size)
            self._copy_video(job, tracker, deadline)
            offer(self.progress, tracker.finish_file())
            copied_subtitles.extend(self._copy_subtitles(job, deadline))

        return copied_subtitles

    def _copy_video(self, job: TransferJob, tracker: ProgressTracker, deadline: Optional[float]) -> None:
        job.state = TransferState.COPYING
        logger.debug(f"Copying {job.source} -> {job.destination}")

        def handle_line(line: str) -> None:
            parsed = parse_progress_line(line)
            if parsed is not None:
                offer(self.progress, tracker.update(parsed))

        try:
            ensure_directory(job.destination.parent, self.elevated)
            process = CopyProcess(
                self.build_command(job.source, job.destination),
                cancel_event=self.cancel_event,
                deadline=deadline,
            )
            process.run(handle_line)
        except TransferFailed as e:
            job.state = TransferState.FAILED
            logger.error(f"Copy failed for {job.source.name}: {e}")
            raise

        job.state = TransferState.SUCCEEDED
        logger.info(f"Copied: {job.destination}")

    def _copy_subtitles(self, job: TransferJob, deadline: Optional[float]) -> List[Path]:
        copied = []
        for source, destination in job.subtitles:
            try:
                self._copy_subtitle(source, destination, deadline)
            except TransferCancelled:
                raise
            except SubtitleCopyFailed as e:
                logger.warning(str(e))
                continue
            copied.append(destination)
        return copied

    def _copy_subtitle(self, source: Path, destination: Path, deadline: Optional[float]) -> None:
        process = CopyProcess(
            self.build_command(source, destination, oneshot=True),
            cancel_event=self.cancel_event,
            deadline=deadline,
        )
        try:
            process.run()
        except TransferCancelled:
            raise
        except TransferFailed as e:
            raise SubtitleCopyFailed(f"Subtitle copy failed for {source.name}: {e}") from e
        logger.debug(f"Subtitle copied: {destination}")
