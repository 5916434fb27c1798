"""
Small string helpers: key/value lookup, trimming, prefixes, random tokens,
whole-word search and tag stripping.
"""

import re
import secrets
import string
from enum import Enum
from typing import Iterable, Optional, Protocol, Sequence

from .exceptions import InvalidArgumentError


URL_SAFE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"

_TAG_NAME_PATTERN = re.compile(r"[A-Za-z][\w:-]*")


class Side(Enum):
    """Which end of a string an operation applies to."""

    BEGIN = "begin"
    END = "end"


class RandomSource(Protocol):
    """Anything that can pick an element from a sequence (``random.Random``, ``secrets.SystemRandom``)."""

    def choice(self, seq: Sequence[str]) -> str: ...


def find_value_by_key(kv_pairs: Iterable[str], key: str) -> Optional[str]:
    """
    Find the value for ``key`` in a sequence of ``"key=value"`` strings.

    Only the first ``=`` separates key from value, so values may contain
    ``=`` themselves. Items without ``=`` are skipped.

    Args:
        kv_pairs: Strings of the form ``"key=value"``
        key: Key to look for

    Returns:
        The value of the first matching pair, or None if no pair matches

    Examples:
        >>> find_value_by_key(["name=John", "age=30"], "name")
        'John'
        >>> find_value_by_key(["name=John", "age=30"], "gender") is None
        True
    """
    for item in kv_pairs:
        item_key, found, value = item.partition("=")
        if found and item_key == key:
            return value
    return None


def trim_char(text: str, target: str, side: Side = Side.BEGIN) -> str:
    """
    Remove ``target`` from one end of ``text`` if it is there.

    At most one character is removed. Text that does not start (or end)
    with ``target`` is returned unchanged.

    Raises:
        InvalidArgumentError: If target is not a single character or side is not a Side

    Examples:
        >>> trim_char("hello", "h", Side.BEGIN)
        'ello'
        >>> trim_char("world!", "!", Side.END)
        'world'
        >>> trim_char("rust", "x", Side.BEGIN)
        'rust'
    """
    if not isinstance(target, str) or len(target) != 1:
        raise InvalidArgumentError(f"target must be a single character, got {target!r}")

    if side is Side.BEGIN:
        if text.startswith(target):
            return text[1:]
    elif side is Side.END:
        if text.endswith(target):
            return text[:-1]
    else:
        raise InvalidArgumentError(f"side must be a Side, got {side!r}")

    return text


def remove_first_n_chars(text: str, count: int) -> str:
    """
    Drop the first ``count`` characters of ``text``.

    Removing more characters than the text holds yields an empty string.

    Raises:
        InvalidArgumentError: If count is negative or not an integer
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise InvalidArgumentError(f"count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise InvalidArgumentError(f"count must not be negative, got {count}")
    return text[count:]


def remove_prefix(text: str, prefix: str) -> str:
    """Remove ``prefix`` once from the start of ``text`` if present."""
    return text.removeprefix(prefix)


def generate_random_string(length: int, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a random string drawn from ``URL_SAFE_ALPHABET``.

    Args:
        length: Number of characters to produce
        rng: Random source; defaults to the operating system's CSPRNG.
            Pass a seeded ``random.Random`` for reproducible output.

    Returns:
        A string of exactly ``length`` URL-safe characters

    Raises:
        InvalidArgumentError: If length is negative or not an integer
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise InvalidArgumentError(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise InvalidArgumentError(f"length must not be negative, got {length}")

    if rng is None:
        rng = secrets.SystemRandom()

    return "".join(rng.choice(URL_SAFE_ALPHABET) for _ in range(length))


def _whole_word_pattern(word: str) -> re.Pattern:
    if not isinstance(word, str) or not word:
        raise InvalidArgumentError("word must be a non-empty string")
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)")


def find_whole_word(text: str, word: str) -> list[int]:
    """
    Find every whole-word occurrence of ``word`` in ``text``.

    A match counts only when it is not directly preceded or followed by a
    word character, so ``"cat"`` matches in ``"a cat."`` but not in
    ``"concat"``.

    Returns:
        Start offsets of the matches, in order

    Examples:
        >>> find_whole_word("cat concat cat", "cat")
        [0, 11]
    """
    pattern = _whole_word_pattern(word)
    return [match.start() for match in pattern.finditer(text)]


def contains_whole_word(text: str, word: str) -> bool:
    """Return True if ``word`` occurs in ``text`` as a whole word."""
    return _whole_word_pattern(word).search(text) is not None


def strip_tagged_regions(text: str, tag: str) -> str:
    """
    Remove every ``<tag ...>...</tag>`` region, including its content.

    Matching is case-insensitive, non-greedy and spans newlines.
    Self-closing ``<tag/>`` elements are removed too. An opening tag with
    no closing tag is left in place.

    Raises:
        InvalidArgumentError: If tag is not a valid tag name

    Examples:
        >>> strip_tagged_regions("keep <think>drop</think>this", "think")
        'keep this'
    """
    if not isinstance(tag, str) or not _TAG_NAME_PATTERN.fullmatch(tag):
        raise InvalidArgumentError(f"Invalid tag name: {tag!r}")

    name = re.escape(tag)
    pattern = re.compile(
        rf"<{name}(?:\s[^>]*)?>.*?</{name}\s*>|<{name}(?:\s[^>]*)?/>",
        re.IGNORECASE | re.DOTALL,
    )
    return pattern.sub("", text)
