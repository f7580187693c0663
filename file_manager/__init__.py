"""
Smart File Manager
==================

Scans a directory, sorts its files into category folders, searches
them by name and reports likely duplicates.

Features:
- Extension based organization with skip-on-conflict moves
- Case-insensitive name search
- Duplicate detection by name and size
- Append-only activity log
"""

__version__ = "1.0.0"
