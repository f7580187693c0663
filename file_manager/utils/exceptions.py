"""
Custom Exceptions
=================

Defines custom exception classes for the Smart File Manager.
All exceptions include error codes for programmatic handling.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes for programmatic error handling."""

    # General errors (1000-1099)
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    FILE_NOT_FOUND = 1002
    PERMISSION_DENIED = 1003

    # Directory errors (1100-1199)
    DIRECTORY_NOT_FOUND = 1100
    NOT_A_DIRECTORY = 1101
    DIRECTORY_CREATE_FAILED = 1102

    # Processing errors (1200-1299)
    PROCESSING_FAILED = 1200
    MOVE_FAILED = 1201
    DESTINATION_EXISTS = 1202

    # Extraction errors (1300-1399)
    EXTRACTION_FAILED = 1300


class FileManagerError(Exception):
    """Base exception for all Smart File Manager errors.

    Attributes:
        message: Human-readable error message.
        error_code: Programmatic error code.
        details: Additional error context.
        cause: Original exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Programmatic error code.
            details: Additional context as key-value pairs.
            cause: Original exception if wrapping another error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return a formatted error string."""
        result = f"[{self.error_code.name}] {self.message}"
        if self.details:
            result += f" | Details: {self.details}"
        if self.cause:
            result += f" | Caused by: {type(self.cause).__name__}: {self.cause}"
        return result

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(FileManagerError):
    """Raised when there's a configuration problem.

    Examples:
        - Invalid configuration file format
        - Invalid configuration values
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            **kwargs
        )


class DirectoryError(FileManagerError):
    """Raised when a target directory cannot be used.

    This is the only failure the engine surfaces to its caller; the caller
    decides whether to abort or retry with a corrected path.
    """

    def __init__(
        self,
        message: str,
        directory: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DIRECTORY_NOT_FOUND,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if directory:
            details["directory"] = directory
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            **kwargs
        )


class FileProcessingError(FileManagerError):
    """Raised when a single file cannot be moved or its folder created.

    Examples:
        - Source vanished before the move
        - Permission denied on the category folder
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.PROCESSING_FAILED,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if file_path:
            details["file_path"] = file_path
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            **kwargs
        )


class ExtractionError(FileManagerError):
    """Raised when file metadata cannot be read."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if file_path:
            details["file_path"] = file_path
        super().__init__(
            message,
            error_code=ErrorCode.EXTRACTION_FAILED,
            details=details,
            **kwargs
        )
