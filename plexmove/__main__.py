"""Entry point for the plexmove package.

This module provides the command-line entry point for moving a finished
download into the library.
Run with: python -m plexmove
"""

import queue
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from loguru import logger
from tqdm import tqdm

from plexmove.config import (
    PROGRESS_QUEUE_SIZE,
    CLIArgs,
    args_to_cli_args,
    parse_arguments,
    resolve_library_roots,
    validate_library_roots,
)
from plexmove.exceptions import CleanupFailed, PlexMoveError
from plexmove.models import Classification, MoveOutcome, MoveRequest, ProgressEvent
from plexmove.pipeline import Mover, classify_source
from plexmove.ui import (
    ConsoleUI,
    display_classification,
    display_outcome,
    display_remaining,
)


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        "plexmove.log",
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def build_classification(cli_args: CLIArgs) -> Classification:
    """Detect the download and apply the user's corrections."""
    detected = classify_source(cli_args.source)
    return detected.with_overrides(
        title=cli_args.title or None,
        kind=cli_args.kind,
        year=cli_args.year,
        season=cli_args.season,
    )


def _apply_event(bar: tqdm, event: ProgressEvent) -> None:
    if event.total_bytes and bar.total != event.total_bytes:
        bar.total = event.total_bytes
    bar.n = event.bytes_copied
    label = event.current_file
    if event.file_index:
        label = f"[{event.file_index}/{event.file_count}] {label}"
    bar.set_postfix_str(f"{label} {event.rate} {event.eta_display}".strip(), refresh=False)
    bar.refresh()


def run_move(
    mover: Mover,
    request: MoveRequest,
    timeout: Optional[float] = None,
) -> MoveOutcome:
    """
    Run a move on a worker thread while rendering its progress.

    Ctrl+C cancels the copy; the worker then raises TransferCancelled,
    which is propagated to the caller.

    Args:
        mover: Mover bound to the library roots.
        request: Move to perform.
        timeout: Copy deadline in seconds.

    Returns:
        MoveOutcome of the move.
    """
    events: "queue.Queue[ProgressEvent]" = queue.Queue(maxsize=PROGRESS_QUEUE_SIZE)
    cancel = threading.Event()

    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(mover.move, request, events, cancel, timeout)
        with tqdm(total=0, unit="B", unit_scale=True, unit_divisor=1024, desc="Copying") as bar:
            try:
                while not future.done() or not events.empty():
                    try:
                        event = events.get(timeout=0.1)
                    except queue.Empty:
                        continue
                    _apply_event(bar, event)
            except KeyboardInterrupt:
                logger.warning("Interrupted, cancelling copy")
                cancel.set()
        return future.result()


def offer_purge(mover: Mover, outcome: MoveOutcome, cli_args: CLIArgs, console: ConsoleUI) -> None:
    """Remove the download directory when asked, or after confirmation."""
    if not outcome.source_is_directory:
        return

    if not cli_args.purge:
        if not outcome.remaining_source_entries:
            return
        display_remaining(outcome.remaining_source_entries, console)
        if not cli_args.assume_yes and not console.confirm(
            f"Delete {outcome.source_dir} with its remaining files?"
        ):
            return

    try:
        mover.purge_remaining(outcome)
    except CleanupFailed as e:
        console.print_warning(str(e))
        return
    console.print_success(f"Removed {outcome.source_dir}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the move tool.

    Args:
        argv: Argument list (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    try:
        roots = resolve_library_roots(cli_args.movie_library, cli_args.tv_library)
        validate_library_roots(roots)

        classification = build_classification(cli_args)
        display_classification(classification, cli_args.source, console)

        request = MoveRequest(
            source_path=cli_args.source,
            classification=classification,
            cleanup_after_move=cli_args.cleanup or cli_args.purge,
            use_elevated_copy=cli_args.sudo,
            rename_episodes=cli_args.rename,
        )
        mover = Mover(roots)
        outcome = run_move(mover, request, cli_args.timeout)
    except PlexMoveError as e:
        logger.debug(f"Move failed: {e!r}")
        console.print_error(str(e))
        return 1

    display_outcome(outcome, console)
    offer_purge(mover, outcome, cli_args, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
