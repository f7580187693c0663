"""Metadata extraction and directory scanning."""

from .metadata_reader import (
    FileRecord,
    ExtractionResult,
    MetadataExtractor,
    extract_extension,
    format_size,
)
from .directory_scanner import DirectoryScanner, directory_exists

__all__ = [
    "FileRecord",
    "ExtractionResult",
    "MetadataExtractor",
    "extract_extension",
    "format_size",
    "DirectoryScanner",
    "directory_exists",
]
