"""
Reorganizer
===========

Moves scanned files into one folder per category.

For every record, in input order: classify it, create
``<base>/<category>`` if needed, and move the file there unless a file
with the same name is already present. A conflict is skipped, never
overwritten or renamed; a dangling symlink counts as present. A record
without a name (metadata unreadable at scan time) fails without touching
the disk. A failure on one record is logged and the batch carries on.
"""

from pathlib import Path
from typing import List, Optional, Sequence
from dataclasses import dataclass, field
from enum import Enum

from file_manager.actions.file_operations import FileOperations, path_taken
from file_manager.classification.classifier import CategoryClassifier
from file_manager.extraction.metadata_reader import FileRecord
from file_manager.utils.activity_log import NullActivityLog
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)


class MoveStatus(Enum):
    """What happened to one record."""
    MOVED = "moved"
    SKIPPED_EXISTS = "skipped_exists"
    FAILED = "failed"


@dataclass(frozen=True)
class PlannedMove:
    """Where a record is going.

    Attributes:
        record: Record to move.
        category: Category the record was classified into.
        destination_dir: Category folder.
        destination: Full destination path.
    """
    record: FileRecord
    category: str
    destination_dir: Path
    destination: Path


@dataclass(frozen=True)
class MoveOutcome:
    """Result of executing one planned move."""
    move: PlannedMove
    status: MoveStatus
    error: Optional[str] = None


@dataclass
class ReorganizeReport:
    """Per-record outcomes of one reorganize run."""
    outcomes: List[MoveOutcome] = field(default_factory=list)

    def _count(self, status: MoveStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def moved_count(self) -> int:
        return self._count(MoveStatus.MOVED)

    @property
    def skipped_count(self) -> int:
        return self._count(MoveStatus.SKIPPED_EXISTS)

    @property
    def failed_count(self) -> int:
        return self._count(MoveStatus.FAILED)

    def by_category(self) -> dict:
        """Count moved files per category."""
        counts: dict = {}
        for outcome in self.outcomes:
            if outcome.status == MoveStatus.MOVED:
                category = outcome.move.category
                counts[category] = counts.get(category, 0) + 1
        return counts

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": len(self.outcomes),
            "moved": self.moved_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "by_category": self.by_category(),
        }


class Reorganizer:
    """Plans and executes category moves with per-file failure isolation."""

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        file_ops: Optional[FileOperations] = None,
        activity_log=None
    ):
        """Initialize reorganizer.

        Args:
            classifier: Category classifier. Uses the built-in table if None.
            file_ops: Filesystem operations.
            activity_log: Sink for progress and error messages.
        """
        self.classifier = classifier or CategoryClassifier()
        self.file_ops = file_ops or FileOperations()
        self.activity_log = activity_log or NullActivityLog()

    def plan(self, records: Sequence[FileRecord], base_directory: Path) -> List[PlannedMove]:
        """Compute destinations without touching the filesystem.

        The plan is only valid for the snapshot it was computed from.
        """
        base_directory = Path(base_directory)
        moves = []
        for record in records:
            category = self.classifier.category_for(record.extension)
            destination_dir = base_directory / category
            moves.append(PlannedMove(
                record=record,
                category=category,
                destination_dir=destination_dir,
                destination=destination_dir / record.name,
            ))
        return moves

    def execute(self, plan: Sequence[PlannedMove]) -> ReorganizeReport:
        """Carry out a plan, one move at a time.

        Args:
            plan: Moves from ``plan``.

        Returns:
            ReorganizeReport with one outcome per move.
        """
        report = ReorganizeReport()
        for move in plan:
            report.outcomes.append(self._execute_one(move))
        return report

    def _execute_one(self, move: PlannedMove) -> MoveOutcome:
        record = move.record
        if not record.name:
            message = "ERROR moving file: file info unavailable (unreadable at scan time)"
            self.activity_log.log(message)
            logger.error(message)
            return MoveOutcome(move=move, status=MoveStatus.FAILED, error="File info unavailable")

        try:
            self.file_ops.ensure_directory(move.destination_dir)

            if path_taken(move.destination):
                self.activity_log.log(f"SKIPPED: File already exists: {move.destination}")
                logger.info(f"Skipping (exists): {record.name}")
                return MoveOutcome(move=move, status=MoveStatus.SKIPPED_EXISTS)

            self.file_ops.move_file(record.path, move.destination)

        except Exception as e:
            message = f"ERROR moving {record.name} ({record.path}): {e}"
            self.activity_log.log(message)
            logger.error(message)
            return MoveOutcome(move=move, status=MoveStatus.FAILED, error=str(e))

        self.activity_log.log(f"Moved: {record.name} -> {move.category}/")
        return MoveOutcome(move=move, status=MoveStatus.MOVED)

    def reorganize_with_report(
        self,
        records: Sequence[FileRecord],
        base_directory: Path
    ) -> ReorganizeReport:
        """Plan and execute moves, returning every per-record outcome."""
        self.activity_log.log(f"Starting file organization in: {base_directory}")
        report = self.execute(self.plan(records, base_directory))
        self.activity_log.log(
            f"Organization complete: {report.moved_count} files moved"
        )
        logger.info(
            f"Reorganized {base_directory}: {report.moved_count} moved, "
            f"{report.skipped_count} skipped, {report.failed_count} failed"
        )
        return report

    def reorganize(self, records: Sequence[FileRecord], base_directory: Path) -> int:
        """Move records into category folders under ``base_directory``.

        Returns:
            Number of files actually moved. Conflicts and failures are not
            counted.
        """
        return self.reorganize_with_report(records, base_directory).moved_count
