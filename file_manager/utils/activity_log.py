"""
Activity Log
============

Append-only, line-oriented log of everything the engine does.

Each line is ``[YYYY-MM-DD HH:MM:SS] message``. There are no levels,
no rotation and no structured fields. The log is constructed once by the
caller and handed to every engine component; nothing reaches for a global.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_LOG_FILE = "file_manager.log"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class _QuietFileHandler(logging.FileHandler):
    """FileHandler whose write failures go to the diagnostic logger."""

    def handleError(self, record: logging.LogRecord) -> None:
        logger.warning(f"Could not write activity log line to {self.baseFilename}")


class ActivityLog:
    """Timestamped append-only log file.

    Built on ``logging.FileHandler``: every line is written under the
    handler lock and flushed immediately, so concurrent writers never
    interleave within a line. Failures to write are reported on the
    diagnostic logger and never raised to the caller.
    """

    START_BANNER = "=== File Management System Started ==="
    STOP_BANNER = "=== File Management System Stopped ==="

    def __init__(self, log_file: Union[str, Path, None] = None):
        """Open (or create) the log file in append mode.

        Args:
            log_file: Path of the log file. Defaults to ``file_manager.log``
                in the current directory.
        """
        self.log_file = Path(log_file) if log_file else Path(DEFAULT_LOG_FILE)

        # Private logger, not registered with the logging manager
        self._logger = logging.Logger(f"{__name__}.sink")
        self._logger.propagate = False
        self._logger.setLevel(logging.INFO)
        self._handler: Optional[logging.Handler] = None

        try:
            handler = _QuietFileHandler(self.log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to open activity log {self.log_file}: {e}")
        else:
            handler.setFormatter(
                logging.Formatter("[%(asctime)s] %(message)s", datefmt=TIMESTAMP_FORMAT)
            )
            self._logger.addHandler(handler)
            self._handler = handler
            self.log(self.START_BANNER)

    @property
    def is_open(self) -> bool:
        """Whether lines are actually reaching the file."""
        return self._handler is not None

    def log(self, message: str) -> None:
        """Append one timestamped line."""
        if self._handler is None:
            return
        self._logger.info(message)

    def close(self) -> None:
        """Write the stop banner and release the file."""
        if self._handler is None:
            return
        self.log(self.STOP_BANNER)
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def __enter__(self) -> "ActivityLog":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class NullActivityLog:
    """Activity log that discards every line."""

    def log(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass
