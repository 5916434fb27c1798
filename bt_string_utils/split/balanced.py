"""
Word-balanced splitting.

Splits a string into a fixed number of contiguous groups whose word counts
differ by at most one. Separators are never dropped: the leading separator
run stays with the first group, the trailing one with the last group, and
the run between two groups closes the earlier group.
"""

import logging

from ..exceptions import InvalidArgumentError, ValidationError
from .utils import validate_groups


logger = logging.getLogger(__name__)


# Single-character marks that end a word just like whitespace does.
# The hyphen is not listed, so "state-of-the-art" is one word.
WORD_BOUNDARY_PUNCTUATION = frozenset(
    ".,;:!?'\"()[]{}<>"
    "«»“”‘’…"
)


def is_separator(char: str) -> bool:
    """Return True if ``char`` separates words (whitespace or boundary punctuation)."""
    return char.isspace() or char in WORD_BOUNDARY_PUNCTUATION


def find_word_starts(text: str) -> list[int]:
    """
    Return the start offset of every word in ``text``, in order.

    A word is a maximal run of characters that are neither whitespace nor
    in ``WORD_BOUNDARY_PUNCTUATION``.
    """
    starts = []
    in_word = False
    for index, char in enumerate(text):
        if is_separator(char):
            in_word = False
        elif not in_word:
            starts.append(index)
            in_word = True
    return starts


def count_split_words(text: str) -> int:
    """Count words the way ``split_balanced`` sees them."""
    return len(find_word_starts(text))


def split_balanced(text: str, num_groups: int) -> list[str]:
    """
    Split text into ``num_groups`` groups with balanced word counts.

    Groups holding one extra word come first. Concatenating the returned
    groups always reproduces ``text`` exactly.

    Args:
        text: Input text to split (may be empty)
        num_groups: Requested number of groups, at least 1

    Returns:
        ``min(num_groups, word_count)`` groups, or ``[text]`` when the text
        has no words at all

    Raises:
        InvalidArgumentError: If text is not a string or num_groups is not
            a positive integer
        ValidationError: If the groups fail to reproduce the input

    Examples:
        >>> split_balanced("one two three four five", 2)
        ['one two three ', 'four five']
        >>> split_balanced("Hi! Bob.", 2)
        ['Hi! ', 'Bob.']
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")

    if not isinstance(num_groups, int) or isinstance(num_groups, bool):
        raise InvalidArgumentError(
            f"num_groups must be an integer, got {type(num_groups).__name__}"
        )

    if num_groups <= 0:
        raise InvalidArgumentError(f"num_groups must be positive, got {num_groups}")

    word_starts = find_word_starts(text)
    total_words = len(word_starts)

    if total_words == 0:
        logger.debug("No words found, returning the whole text as one group")
        return [text]

    if num_groups > total_words:
        logger.warning(
            f"num_groups ({num_groups}) exceeds word count ({total_words}); "
            f"returning {total_words} groups"
        )

    group_count = min(num_groups, total_words)
    words_per_group = total_words // group_count
    remainder = total_words % group_count

    logger.debug(
        f"Splitting {total_words} words into {group_count} groups "
        f"({words_per_group} words each, {remainder} with one extra)"
    )

    # Offsets where each group after the first begins
    boundaries = []
    word_index = 0
    for i in range(group_count - 1):
        word_index += words_per_group + (1 if i < remainder else 0)
        boundaries.append(word_starts[word_index])

    groups = []
    start = 0
    for end in boundaries:
        groups.append(text[start:end])
        start = end
    groups.append(text[start:])

    if not validate_groups(text, groups):
        raise ValidationError(
            "Content validation failed: groups do not preserve original text"
        )

    return groups
