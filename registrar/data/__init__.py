"""
Data loading and parsing module.

This package handles all file I/O and row parsing.
"""

from .loader import DataLoader, term_slug
from .parser import (
    TranscriptParser,
    parse_program_row,
    parse_window_row,
    parse_waiver_row,
)
from .requirements import RequirementDocumentParser, split_course_code

__all__ = [
    "DataLoader",
    "term_slug",
    "TranscriptParser",
    "parse_program_row",
    "parse_window_row",
    "parse_waiver_row",
    "RequirementDocumentParser",
    "split_course_code",
]
