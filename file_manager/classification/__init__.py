"""Classification module for file categorization."""

from .classifier import CategoryClassifier, ClassificationResult

__all__ = [
    "CategoryClassifier",
    "ClassificationResult",
]
