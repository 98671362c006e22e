"""User interface components."""

from plexmove.ui.console import ConsoleUI
from plexmove.ui.display import (
    format_size,
    display_classification,
    build_outcome_tree,
    display_outcome,
    display_remaining,
)

__all__ = [
    "ConsoleUI",
    "format_size",
    "display_classification",
    "build_outcome_tree",
    "display_outcome",
    "display_remaining",
]
