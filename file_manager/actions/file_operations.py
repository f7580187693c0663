"""
File Operations
===============

Filesystem primitives used by the reorganizer.
Every operation either succeeds or raises ``FileProcessingError``.
"""

import os
from pathlib import Path
import shutil

from file_manager.utils.logging_config import get_logger
from file_manager.utils.exceptions import FileProcessingError, ErrorCode

logger = get_logger(__name__)


def path_taken(path: Path) -> bool:
    """True if any directory entry sits at ``path``, dangling symlinks included."""
    return os.path.lexists(path)


class FileOperations:
    """Directory creation and no-clobber moves."""

    def ensure_directory(self, directory: Path) -> Path:
        """Create a directory and any missing parents.

        Succeeds if the directory already exists.

        Args:
            directory: Directory to create.

        Returns:
            The directory path.

        Raises:
            FileProcessingError: If the directory cannot be created, or a
                non-directory is in the way.
        """
        directory = Path(directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileProcessingError(
                f"Failed to create directory: {e}",
                file_path=str(directory),
                error_code=ErrorCode.DIRECTORY_CREATE_FAILED,
                cause=e
            ) from e
        return directory

    def move_file(self, source: Path, dest_path: Path) -> Path:
        """Move a file to an exact destination path.

        Uses a rename when source and destination share a filesystem and
        falls back to copy-then-delete otherwise. Never overwrites: an
        existing destination is an error.

        Args:
            source: Source file path.
            dest_path: Destination file path.

        Returns:
            Final path of moved file.

        Raises:
            FileProcessingError: If the source is missing, the destination
                exists, or the move fails.
        """
        source = Path(source)
        dest_path = Path(dest_path)

        if not source.is_file():
            raise FileProcessingError(
                "Source file does not exist",
                file_path=str(source),
                error_code=ErrorCode.FILE_NOT_FOUND
            )

        if path_taken(dest_path):
            raise FileProcessingError(
                "Destination already exists",
                file_path=str(dest_path),
                error_code=ErrorCode.DESTINATION_EXISTS
            )

        try:
            shutil.move(str(source), str(dest_path))
        except (OSError, shutil.Error) as e:
            self._discard_partial_copy(source, dest_path)
            raise FileProcessingError(
                f"Failed to move file: {e}",
                file_path=str(source),
                error_code=ErrorCode.MOVE_FAILED,
                cause=e
            ) from e

        logger.debug(f"Moved: {source} -> {dest_path}")
        return dest_path

    def _discard_partial_copy(self, source: Path, dest_path: Path) -> None:
        """Remove a half-written destination left by a failed cross-device move."""
        if not (source.exists() and dest_path.is_file()):
            return
        try:
            dest_path.unlink()
            logger.warning(f"Removed partial copy at {dest_path}")
        except OSError as e:
            logger.error(f"Could not remove partial copy at {dest_path}: {e}")
