"""Core menu extraction logic.

Subpackages:
- parsing: line classification, section segmentation, day-block splitting
- weeks: calendar helpers and week resolution
- index: per-week parsing, index merge and lookup

menu_service ties them to the upstream menu repository.
"""
__all__ = ["parsing", "weeks", "index", "menu_service"]
