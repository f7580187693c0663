"""Utilities module for Smart File Manager."""

from .logging_config import setup_logging, get_logger, LoggingConfig
from .activity_log import ActivityLog, NullActivityLog
from .exceptions import (
    ErrorCode,
    FileManagerError,
    ConfigurationError,
    DirectoryError,
    FileProcessingError,
    ExtractionError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "ActivityLog",
    "NullActivityLog",
    "ErrorCode",
    "FileManagerError",
    "ConfigurationError",
    "DirectoryError",
    "FileProcessingError",
    "ExtractionError",
]
