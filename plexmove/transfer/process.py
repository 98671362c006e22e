"""Cancellable execution of the external copy tool."""

import subprocess
import threading
import time
from typing import Callable, List, Optional, Sequence

from loguru import logger

from plexmove.config.settings import CANCEL_POLL_INTERVAL, TERMINATE_GRACE_SECONDS
from plexmove.exceptions import TransferCancelled, TransferFailed
from plexmove.transfer.parser import iter_stream_lines

LineHandler = Callable[[str], None]


class CopyProcess:
    """
    Runs one copy command and streams its output lines to a handler.

    Standard output is read on a dedicated thread so that waiting for
    the process can be interrupted by the cancel token or deadline.
    Standard error is collected for the failure message.
    """

    def __init__(
        self,
        command: Sequence[str],
        cancel_event: Optional[threading.Event] = None,
        deadline: Optional[float] = None,
    ) -> None:
        """
        Args:
            command: Full command line.
            cancel_event: Set by the caller to abort the copy.
            deadline: time.monotonic() value after which the copy is aborted.
        """
        self.command = list(command)
        self.cancel_event = cancel_event
        self.deadline = deadline
        self.returncode: Optional[int] = None
        self._stderr_chunks: List[bytes] = []
        self._handler_error: Optional[BaseException] = None

    @property
    def stderr(self) -> str:
        """Captured standard error text."""
        return b''.join(self._stderr_chunks).decode('utf-8', errors='replace')

    def run(self, on_line: Optional[LineHandler] = None) -> None:
        """
        Run the command to completion.

        Args:
            on_line: Called from the reader thread for every output line.

        Raises:
            TransferFailed: If the command cannot start or exits non-zero.
            TransferCancelled: If the cancel token is set or the deadline passes.
        """
        logger.debug(f"Running: {' '.join(self.command)}")
        try:
            process = subprocess.Popen(
                self.command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise TransferFailed(f"Cannot start {self.command[0]}: {e}") from e

        reader = threading.Thread(
            target=self._read_stdout, args=(process, on_line), daemon=True
        )
        collector = threading.Thread(
            target=self._read_stderr, args=(process,), daemon=True
        )
        reader.start()
        collector.start()

        abort_reason = self._wait(process)

        # A grandchild (rsync under sudo) may hold the pipes open after an abort
        join_timeout = TERMINATE_GRACE_SECONDS if abort_reason else None
        reader.join(join_timeout)
        collector.join(join_timeout)
        self.returncode = process.returncode

        if abort_reason:
            raise TransferCancelled(
                f"Copy {abort_reason}", returncode=self.returncode, stderr=self.stderr
            )
        if self._handler_error is not None:
            raise TransferFailed(f"Progress handling failed: {self._handler_error}") from self._handler_error
        if self.returncode != 0:
            raise TransferFailed(
                f"{self.command[0]} exited with status {self.returncode}",
                returncode=self.returncode,
                stderr=self.stderr,
            )

    def _wait(self, process: subprocess.Popen) -> Optional[str]:
        """Wait for exit; return why the process was aborted, if it was."""
        while True:
            try:
                process.wait(timeout=CANCEL_POLL_INTERVAL)
                return None
            except subprocess.TimeoutExpired:
                pass

            if self.cancel_event is not None and self.cancel_event.is_set():
                reason = "cancelled"
            elif self.deadline is not None and time.monotonic() >= self.deadline:
                reason = "timed out"
            else:
                continue

            logger.warning(f"{self.command[0]} {reason}, terminating")
            self._terminate(process)
            return reason

    @staticmethod
    def _terminate(process: subprocess.Popen) -> None:
        process.terminate()
        try:
            process.wait(timeout=TERMINATE_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            logger.warning(f"Process {process.pid} ignored SIGTERM, killing")
            process.kill()
            process.wait()

    def _read_stdout(self, process: subprocess.Popen, on_line: Optional[LineHandler]) -> None:
        for line in iter_stream_lines(process.stdout):
            if on_line is None or self._handler_error is not None:
                continue
            try:
                on_line(line)
            except Exception as e:
                # Keep draining so the child never blocks on a full pipe
                self._handler_error = e
        process.stdout.close()

    def _read_stderr(self, process: subprocess.Popen) -> None:
        for chunk in iter(lambda: process.stderr.read(4096), b''):
            self._stderr_chunks.append(chunk)
        process.stderr.close()
