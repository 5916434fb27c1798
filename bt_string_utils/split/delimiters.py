"""
Delimiter-based splitting helpers.
"""

from ..exceptions import InvalidArgumentError


def _check_separator(separator: str) -> None:
    if not isinstance(separator, str):
        raise InvalidArgumentError(
            f"separator must be a string, got {type(separator).__name__}"
        )
    if not separator:
        raise InvalidArgumentError("separator cannot be empty")


def get_first_of_split(text: str, separator: str) -> tuple[str, str]:
    """
    Split text at the first occurrence of separator.

    Args:
        text: Text to split
        separator: Substring to split on (may be longer than one character)

    Returns:
        ``(before, after)`` with the separator removed, or ``(text, "")`` if
        the separator does not occur

    Examples:
        >>> get_first_of_split("First:Second:Third", ":")
        ('First', 'Second:Third')
        >>> get_first_of_split("no=separator", " ")
        ('no=separator', '')
    """
    _check_separator(separator)
    before, found, after = text.partition(separator)
    if not found:
        return text, ""
    return before, after


def get_first_occurrence(text: str, separator: str) -> str:
    """
    Return the text before the first occurrence of separator.

    Returns an empty string when the separator is absent; use
    ``first_segment`` to get the whole text back instead.

    Examples:
        >>> get_first_occurrence("Hello, world!", ", ")
        'Hello'
        >>> get_first_occurrence("No separator here", ",")
        ''
    """
    _check_separator(separator)
    position = text.find(separator)
    if position == -1:
        return ""
    return text[:position]


def first_segment(text: str, separator: str) -> str:
    """Return the text before the first separator, or the whole text if absent."""
    return get_first_of_split(text, separator)[0]


def split_all(text: str, separator: str) -> list[str]:
    """Split text on every occurrence of separator, keeping empty segments."""
    _check_separator(separator)
    return text.split(separator)
