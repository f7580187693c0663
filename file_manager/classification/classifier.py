"""
Category Classifier
===================

Extension based classification against the fixed category table.
"""

from dataclasses import dataclass
from typing import Optional

from file_manager.config.categories import CategoryTable, CATEGORY_TABLE, FALLBACK_CATEGORY
from file_manager.extraction.metadata_reader import FileRecord


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying one record.

    Attributes:
        record: The classified record.
        category: Category name, "Others" for unknown extensions.
    """
    record: FileRecord
    category: str

    @property
    def is_fallback(self) -> bool:
        """Whether no table entry matched."""
        return self.category == FALLBACK_CATEGORY


class CategoryClassifier:
    """Maps extensions to category names.

    Lookups are case-insensitive and never fail: anything the table does
    not know, including the empty extension, is "Others".
    """

    def __init__(self, table: Optional[CategoryTable] = None):
        """Initialize classifier.

        Args:
            table: Category table. Uses the built-in table if None.
        """
        self.table = table if table is not None else CATEGORY_TABLE

    def category_for(self, extension: str) -> str:
        """Get the category name for an extension."""
        return self.table.category_for(extension)

    def classify(self, record: FileRecord) -> ClassificationResult:
        """Classify a record by its extension."""
        return ClassificationResult(record=record, category=self.category_for(record.extension))
