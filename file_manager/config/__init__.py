"""Configuration module for Smart File Manager."""

from .settings import (
    Config,
    ScanConfig,
    OrganizationConfig,
    LogConfig,
)
from .categories import FileCategory, CategoryTable, CATEGORY_TABLE, FALLBACK_CATEGORY

__all__ = [
    "Config",
    "ScanConfig",
    "OrganizationConfig",
    "LogConfig",
    "FileCategory",
    "CategoryTable",
    "CATEGORY_TABLE",
    "FALLBACK_CATEGORY",
]
