"""
Word and paragraph counting with word-processor style rules.
"""

import string


# ASCII punctuation stripped from token edges; apostrophes and hyphens stay
# so contractions and hyphenated words keep their shape.
_EDGE_PUNCTUATION = "".join(c for c in string.punctuation if c not in "'-")

_CJK_RANGES = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0xF900, 0xFAFF),  # Compatibility Ideographs
    (0x2F800, 0x2FA1F),  # Compatibility Supplement
)


def is_cjk(char: str) -> bool:
    """
    Return True if ``char`` is a CJK ideograph.

    Examples:
        >>> is_cjk("你")
        True
        >>> is_cjk("a")
        False
    """
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in _CJK_RANGES)


def word_count(text: str) -> int:
    """
    Count words the way a word processor does.

    Rules:
        - Tokens are separated by any whitespace.
        - Leading/trailing punctuation is ignored (``"hello,"`` is ``hello``);
          tokens made only of punctuation do not count.
        - Hyphenated words, contractions, URLs and emoji count as one word.
        - A token made only of CJK ideographs counts one word per character.

    Examples:
        >>> word_count("Hello, world!")
        2
        >>> word_count("state-of-the-art")
        1
        >>> word_count("I'm here")
        2
    """
    count = 0

    for token in text.split():
        trimmed = token.strip(_EDGE_PUNCTUATION)

        if not trimmed:
            continue

        if all(is_cjk(c) for c in trimmed):
            count += len(trimmed)
            continue

        count += 1

    return count


def count_paragraphs(text: str) -> int:
    """
    Count paragraphs in plain text.

    ``\\r\\n``, ``\\n`` and ``\\r`` each end a paragraph, and consecutive
    newlines produce empty paragraphs that are counted too.

    Returns:
        0 for empty text, 1 for text without newlines. Text that starts with
        a newline counts one paragraph per newline; otherwise the count is
        the number of newlines plus one.

    Examples:
        >>> count_paragraphs("Hello")
        1
        >>> count_paragraphs("Line1\\n\\nLine3")
        3
        >>> count_paragraphs("")
        0
    """
    if not text:
        return 0

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    newline_count = normalized.count("\n")

    if newline_count == 0:
        return 1

    if normalized.startswith("\n"):
        return newline_count

    return newline_count + 1
