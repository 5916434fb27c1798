"""
bt_string_utils: stateless string helpers.

The centerpiece is ``split_balanced``, which cuts a string into N groups
with balanced word counts without losing a single character.
"""

from .counting import count_paragraphs, is_cjk, word_count
from .exceptions import (
    ChunkingError,
    ConfigurationError,
    InvalidArgumentError,
    StringUtilsError,
    ValidationError,
)
from .split import (
    WORD_BOUNDARY_PUNCTUATION,
    chunk_by_bytes,
    first_segment,
    get_first_occurrence,
    get_first_of_split,
    split_all,
    split_balanced,
)
from .strings import (
    URL_SAFE_ALPHABET,
    Side,
    contains_whole_word,
    find_value_by_key,
    find_whole_word,
    generate_random_string,
    remove_first_n_chars,
    remove_prefix,
    strip_tagged_regions,
    trim_char,
)


__version__ = "0.1.0"

__all__ = [
    "split_balanced",
    "WORD_BOUNDARY_PUNCTUATION",
    "get_first_of_split",
    "get_first_occurrence",
    "first_segment",
    "split_all",
    "chunk_by_bytes",
    "find_value_by_key",
    "Side",
    "trim_char",
    "remove_first_n_chars",
    "remove_prefix",
    "URL_SAFE_ALPHABET",
    "generate_random_string",
    "find_whole_word",
    "contains_whole_word",
    "strip_tagged_regions",
    "word_count",
    "is_cjk",
    "count_paragraphs",
    "StringUtilsError",
    "InvalidArgumentError",
    "ChunkingError",
    "ValidationError",
    "ConfigurationError",
]
