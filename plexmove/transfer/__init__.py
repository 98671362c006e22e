"""External copy orchestration and progress reporting."""

from plexmove.transfer.parser import (
    RsyncProgress,
    parse_human_size,
    parse_progress_line,
    split_lines,
    iter_stream_lines,
)
from plexmove.transfer.progress import (
    ProgressTracker,
    offer,
)
from plexmove.transfer.process import CopyProcess
from plexmove.transfer.orchestrator import (
    TransferState,
    TransferJob,
    TransferOrchestrator,
)

__all__ = [
    "RsyncProgress",
    "parse_human_size",
    "parse_progress_line",
    "split_lines",
    "iter_stream_lines",
    "ProgressTracker",
    "offer",
    "CopyProcess",
    "TransferState",
    "TransferJob",
    "TransferOrchestrator",
]
