"""
Smart File Manager - Main Application
=====================================

Main entry point and the ``FileManager`` session that owns the scanned
file list. Scan, organize, search and duplicate detection all go through
one instance so they always see the same snapshot.
"""

import argparse
import sys
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from file_manager import __version__
from file_manager.config import Config
from file_manager.extraction import DirectoryScanner, FileRecord, directory_exists
from file_manager.classification import CategoryClassifier
from file_manager.deduplication import DuplicateFinder
from file_manager.search import NameSearcher
from file_manager.actions import Reorganizer, ReorganizeReport
from file_manager.utils.activity_log import ActivityLog, NullActivityLog
from file_manager.utils.exceptions import (
    ConfigurationError,
    DirectoryError,
    ErrorCode,
    FileManagerError,
)
from file_manager.utils.logging_config import setup_logging, get_logger, LoggingConfig
from file_manager import display
from file_manager.menu import Menu

logger = get_logger(__name__)


class FileManager:
    """Owner of the record snapshot for one directory.

    Every public operation holds the same lock, so a reorganize can
    never run underneath a search or duplicate query.
    """

    def __init__(
        self,
        directory: Path,
        config: Optional[Config] = None,
        activity_log=None
    ):
        """Initialize the session.

        Args:
            directory: Directory to manage.
            config: Configuration. Uses defaults if None.
            activity_log: Activity log shared by all components.

        Raises:
            DirectoryError: If ``directory`` exists but is not a directory.
        """
        self.config = config or Config()
        self.activity_log = activity_log or NullActivityLog()
        self._lock = threading.RLock()
        self._records: Tuple[FileRecord, ...] = ()

        self._init_components()

        self.directory = Path(directory)
        self.activity_log.log(f"FileManager initialized for directory: {self.directory}")
        if self.directory.exists() and not self.directory.is_dir():
            raise DirectoryError(
                "Path is not a directory",
                directory=str(self.directory),
                error_code=ErrorCode.NOT_A_DIRECTORY
            )
        if not self.directory.exists():
            self.activity_log.log(f"WARNING: Directory does not exist: {self.directory}")
            logger.warning(f"Directory '{self.directory}' does not exist")

    def _init_components(self) -> None:
        """Initialize all processing components."""
        self.scanner = DirectoryScanner(
            activity_log=self.activity_log,
            skip_unreadable=self.config.scan.skip_unreadable
        )
        self.classifier = CategoryClassifier()
        self.reorganizer = Reorganizer(
            classifier=self.classifier,
            activity_log=self.activity_log
        )
        self.duplicate_finder = DuplicateFinder(activity_log=self.activity_log)
        self.searcher = NameSearcher(activity_log=self.activity_log)

    @property
    def files(self) -> Tuple[FileRecord, ...]:
        """Records from the latest scan."""
        return self._records

    def scan(self) -> int:
        """Replace the snapshot with a fresh scan of the directory.

        Returns:
            Number of files found, 0 if the directory is missing.
        """
        with self._lock:
            self._records = self.scanner.scan(self.directory)
            return len(self._records)

    def organize(self, base_directory: Optional[Path] = None) -> ReorganizeReport:
        """Move the scanned files into category folders.

        Args:
            base_directory: Where category folders go. Defaults to the
                configured base directory, then the managed directory.

        Returns:
            ReorganizeReport of the run.
        """
        with self._lock:
            base = (
                base_directory
                or self.config.organization.base_directory
                or self.directory
            )
            report = self.reorganizer.reorganize_with_report(self._records, Path(base))

            # Moved files have new paths; the old snapshot is stale
            if self.config.organization.rescan_after_organize:
                self.scan()
            return report

    def search(self, term: str) -> List[FileRecord]:
        """Case-insensitive name search over the snapshot."""
        with self._lock:
            return self.searcher.search_by_name(self._records, term)

    def find_duplicates(self) -> Dict[str, List[FileRecord]]:
        """Group snapshot records sharing size and name."""
        with self._lock:
            return self.duplicate_finder.find_duplicates(self._records)

    def categories(self) -> Dict[str, List[str]]:
        """Category name to extensions, for display."""
        return self.classifier.table.grouped()

    def change_directory(self, directory: Path) -> None:
        """Switch to another directory and drop the current snapshot.

        Raises:
            DirectoryError: If ``directory`` is not an existing directory.
        """
        directory = Path(directory)
        if not directory_exists(directory):
            raise DirectoryError(
                "Directory does not exist",
                directory=str(directory),
                error_code=ErrorCode.DIRECTORY_NOT_FOUND
            )
        with self._lock:
            self.directory = directory
            self._records = ()
        self.activity_log.log(f"Directory changed to: {directory}")


def default_directory(config: Config) -> Path:
    """Return the configured default directory, creating it if needed."""
    directory = Path(config.scan.default_directory)
    if not directory.exists():
        try:
            directory.mkdir(parents=True)
            print(f"📁 Created test directory: {directory}")
        except OSError as e:
            print(f"⚠️  Could not create test directory: {e}")
            return Path.cwd()
    return directory


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Smart File Manager - organize, search and deduplicate a directory"
    )
    parser.add_argument(
        'directory',
        nargs='?',
        type=Path,
        help='Directory to manage (default: scan.default_directory from config)'
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        default=None,
        help='Path to YAML configuration file (default: ./config.yaml)'
    )
    parser.add_argument(
        '--yes', '-y',
        action='store_true',
        help='Do not ask for confirmation before organizing'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__}"
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        '--scan', '-s',
        action='store_true',
        help='Scan the directory and report the file count'
    )
    actions.add_argument(
        '--list', '-l',
        action='store_true',
        help='List the files in the directory'
    )
    actions.add_argument(
        '--organize', '-o',
        action='store_true',
        help='Move files into category folders'
    )
    actions.add_argument(
        '--search', '-f',
        metavar='TERM',
        help='Find files whose name contains TERM (case-insensitive)'
    )
    actions.add_argument(
        '--duplicates', '-d',
        action='store_true',
        help='Find files with the same name and size'
    )
    actions.add_argument(
        '--categories',
        action='store_true',
        help='Show the extension to category table'
    )
    return parser


def confirm(prompt: str) -> bool:
    """Ask a yes/no question on the terminal."""
    try:
        answer = input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() in ("yes", "y")


def run_command(manager: FileManager, args: argparse.Namespace) -> Optional[int]:
    """Run a one-shot command. Returns None when no command was given."""
    if args.categories:
        display.display_categories(manager.categories())
        return 0

    if args.search is not None and not args.search.strip():
        print("❌ Search term cannot be empty.")
        return 2

    if not (args.scan or args.list or args.organize or args.duplicates or args.search):
        return None

    count = manager.scan()

    if args.scan:
        print(f"✓ Found {count} files in {manager.directory}")
    elif args.list:
        display.display_files(manager.files)
    elif args.search:
        display.display_search_results(manager.search(args.search))
    elif args.duplicates:
        display.display_duplicates(manager.find_duplicates())
    elif args.organize:
        if count == 0:
            print("No files to organize.")
            return 0
        if not args.yes and not confirm(f"Organize {count} files? (yes/no): "):
            print("Organization cancelled.")
            return 0
        report = manager.organize()
        print(f"✓ Organization complete! {report.moved_count} files moved.")
        if report.skipped_count:
            print(f"  {report.skipped_count} skipped (already exist at destination)")
        if report.failed_count:
            print(f"  {report.failed_count} failed (see log)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI support."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.load(args.config)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    setup_logging(LoggingConfig(
        level=config.logging.level,
        console_output=config.logging.console_output
    ))

    directory = args.directory or default_directory(config)

    with ActivityLog(config.logging.activity_log_file) as activity_log:
        activity_log.log("=== Application Starting ===")
        activity_log.log(f"Smart File Management System v{__version__}")
        activity_log.log(f"Target directory: {directory}")

        try:
            manager = FileManager(directory, config=config, activity_log=activity_log)
            exit_code = run_command(manager, args)
            if exit_code is None:
                Menu(manager).run()
                exit_code = 0
        except FileManagerError as e:
            print(f"\n❌ Error: {e}", file=sys.stderr)
            activity_log.log(f"FATAL: {e}")
            return 1
        except KeyboardInterrupt:
            activity_log.log("Interrupted by user")
            return 130

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
