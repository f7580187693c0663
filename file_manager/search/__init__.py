"""Name search module."""

from .name_search import NameSearcher, search_by_name

__all__ = ["NameSearcher", "search_by_name"]
