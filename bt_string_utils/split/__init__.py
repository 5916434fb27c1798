"""
Splitting module for cutting strings into groups and pieces.

Every strategy here is lossless: no characters are dropped or duplicated.
"""

from .balanced import (
    WORD_BOUNDARY_PUNCTUATION,
    count_split_words,
    find_word_starts,
    split_balanced,
)
from .chunkers import STRATEGIES, chunk_by_bytes, process_documents
from .delimiters import first_segment, get_first_occurrence, get_first_of_split, split_all
from .utils import analyze_groups, preview_groups, validate_groups


__all__ = [
    # Word-balanced splitting
    "split_balanced",
    "find_word_starts",
    "count_split_words",
    "WORD_BOUNDARY_PUNCTUATION",
    # Delimiter splitting
    "get_first_of_split",
    "get_first_occurrence",
    "first_segment",
    "split_all",
    # Byte chunking and batches
    "chunk_by_bytes",
    "process_documents",
    "STRATEGIES",
    # Utility functions
    "validate_groups",
    "analyze_groups",
    "preview_groups",
]
