"""Display functions for move plans and outcomes."""

from pathlib import Path
from typing import List

from rich.markup import escape
from rich.tree import Tree

from plexmove.models.media import Classification
from plexmove.models.move import MoveOutcome
from plexmove.ui.console import ConsoleUI


def format_size(num_bytes: int) -> str:
    """
    Format a byte count with binary units.

    Args:
        num_bytes: Size in bytes.

    Returns:
        Human-readable size, e.g. "1.5 GiB".
    """
    size = float(num_bytes)
    for unit in ("B", "KiB", "MiB", "GiB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TiB"


def display_classification(
    classification: Classification,
    source: Path,
    console: ConsoleUI,
) -> None:
    """Show what was detected for a download before moving it."""
    lines = [
        f"Source: [cyan]{escape(str(source))}[/cyan]",
        f"Type: [bold]{classification.kind.label}[/bold]",
        f"Title: {escape(classification.title) if classification.title else '[dim]none[/dim]'}",
    ]
    if classification.year:
        lines.append(f"Year: {classification.year}")
    if classification.season:
        lines.append(f"Season: {classification.season:02d}")
    lines.append(f"Confidence: {classification.confidence:.0%}")

    console.print_panel("\n".join(lines), title="Move to library")


def build_outcome_tree(outcome: MoveOutcome) -> Tree:
    """
    Build a tree of the files placed in the library.

    Args:
        outcome: Result of a move.

    Returns:
        Rich Tree rooted at the destination folder.
    """
    tree = Tree(f"[bold blue]{escape(str(outcome.destination_root))}[/bold blue]")
    folders = {}

    placed = list(outcome.moved_video_paths) + list(outcome.moved_subtitle_paths)
    for path in sorted(placed):
        try:
            relative = path.parent.relative_to(outcome.destination_root)
        except ValueError:
            relative = path.parent
        key = str(relative)
        if key == ".":
            branch = tree
        else:
            if key not in folders:
                folders[key] = tree.add(f"[bold]{escape(key)}[/bold]")
            branch = folders[key]
        style = "green" if path in outcome.moved_video_paths else "dim"
        branch.add(f"[{style}]{escape(path.name)}[/{style}]")

    return tree


def display_outcome(outcome: MoveOutcome, console: ConsoleUI) -> None:
    """Print a summary of a successful move."""
    console.print(build_outcome_tree(outcome))
    console.print_success(
        f"{outcome.files_moved} file(s) moved ({format_size(outcome.total_bytes)})"
    )
    if outcome.cleanup_performed:
        console.print_info(f"Moved files removed from {outcome.source_dir}")


def display_remaining(entries: List[str], console: ConsoleUI) -> None:
    """List leftover entries of the download directory."""
    if not entries:
        return
    table = console.create_table("Remaining in source", ["Entry"])
    for entry in entries:
        table.add_row(escape(entry))
    console.print_table(table)
