"""Data models for media classification and library placement."""

from plexmove.models.media import MediaKind, Classification
from plexmove.models.move import MoveRequest, MoveOutcome, ProgressEvent

__all__ = [
    "MediaKind",
    "Classification",
    "MoveRequest",
    "MoveOutcome",
    "ProgressEvent",
]
