"""Actions module for file operations."""

from .file_operations import FileOperations
from .reorganizer import (
    Reorganizer,
    ReorganizeReport,
    PlannedMove,
    MoveOutcome,
    MoveStatus,
)

__all__ = [
    "FileOperations",
    "Reorganizer",
    "ReorganizeReport",
    "PlannedMove",
    "MoveOutcome",
    "MoveStatus",
]
