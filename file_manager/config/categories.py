"""
Category Definitions
====================

Defines the fixed extension to category table used for organization.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


class FileCategory(Enum):
    """Categories files are sorted into."""
    DOCUMENTS = "Documents"
    IMAGES = "Images"
    VIDEOS = "Videos"
    AUDIO = "Audio"
    ARCHIVES = "Archives"
    CODE = "Code"
    EXECUTABLES = "Executables"
    OTHERS = "Others"


# Category used when no table entry matches
FALLBACK_CATEGORY = FileCategory.OTHERS.value

_EXTENSIONS_BY_CATEGORY = {
    FileCategory.DOCUMENTS: (
        ".txt", ".pdf", ".doc", ".docx", ".xlsx", ".xls",
        ".ppt", ".pptx", ".odt", ".rtf",
    ),
    FileCategory.IMAGES: (
        ".jpg", ".jpeg", ".png", ".gif", ".bmp",
        ".svg", ".ico", ".tiff", ".webp",
    ),
    FileCategory.VIDEOS: (
        ".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm", ".m4v",
    ),
    FileCategory.AUDIO: (
        ".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a",
    ),
    FileCategory.ARCHIVES: (
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz",
    ),
    FileCategory.CODE: (
        ".cpp", ".h", ".hpp", ".c", ".py", ".java", ".js",
        ".ts", ".html", ".css", ".php", ".rb", ".go", ".rs",
    ),
    FileCategory.EXECUTABLES: (
        ".exe", ".dll", ".so", ".app", ".deb", ".rpm",
    ),
}


def _build_table() -> Dict[str, str]:
    table: Dict[str, str] = {}
    for category, extensions in _EXTENSIONS_BY_CATEGORY.items():
        for ext in extensions:
            if ext in table:
                raise ValueError(f"Extension {ext} listed under {table[ext]} and {category.value}")
            table[ext] = category.value
    return table


class CategoryTable:
    """Read-only mapping of lowercased extensions to category names.

    Populated once from the fixed table above. Any lookup miss,
    including the empty extension, resolves to ``"Others"``.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        """Initialize the table.

        Args:
            mapping: Extension to category mapping. Uses the built-in table if None.
        """
        source = dict(mapping) if mapping is not None else _build_table()
        self._mapping = MappingProxyType({ext.lower(): cat for ext, cat in source.items()})

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the underlying mapping."""
        return self._mapping

    def category_for(self, extension: str) -> str:
        """Get the category name for an extension.

        Args:
            extension: File extension including the dot (e.g., ".pdf").
                Matching is case-insensitive.

        Returns:
            Category name, or ``"Others"`` when the extension is unknown.
        """
        return self._mapping.get((extension or "").lower(), FALLBACK_CATEGORY)

    def grouped(self) -> Dict[str, List[str]]:
        """Group extensions by category, both sorted by name."""
        groups: Dict[str, List[str]] = {}
        for ext, category in self._mapping.items():
            groups.setdefault(category, []).append(ext)
        return {category: sorted(groups[category]) for category in sorted(groups)}

    def __contains__(self, extension: str) -> bool:
        return (extension or "").lower() in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)


# Global read-only category table
CATEGORY_TABLE = CategoryTable()
