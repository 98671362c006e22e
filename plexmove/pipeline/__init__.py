"""Move pipeline: detection, planning, transfer and cleanup."""

from plexmove.pipeline.mover import (
    MovePlan,
    Mover,
    classify_source,
)

__all__ = [
    "MovePlan",
    "Mover",
    "classify_source",
]
