"""
Byte-bounded chunking and batch processing of documents.

All strategies are lossless: the pieces they return concatenate (or, for
the delimiter strategy, re-join with the delimiter) to the original text.
"""

import logging
from typing import Any

from tqdm import tqdm

from ..exceptions import ChunkingError, InvalidArgumentError, ValidationError
from .balanced import split_balanced
from .delimiters import split_all
from .utils import analyze_groups, validate_groups


logger = logging.getLogger(__name__)

STRATEGIES = ("balanced", "bytes", "delimiter")


def chunk_by_bytes(text: str, chunk_size: int) -> list[str]:
    """
    Split text into pieces whose UTF-8 encoding is at most ``chunk_size`` bytes.

    Pieces are filled greedily and never cut a character in half.

    Args:
        text: Input text to chunk
        chunk_size: Maximum encoded size of each piece, in bytes

    Returns:
        List of non-empty pieces; an empty list for empty text

    Raises:
        InvalidArgumentError: If chunk_size is not a positive integer
        ChunkingError: If a single character needs more than chunk_size bytes
        ValidationError: If content preservation fails

    Examples:
        >>> chunk_by_bytes("hello world", 5)
        ['hello', ' worl', 'd']
        >>> chunk_by_bytes("héllo", 2)
        ['h', 'é', 'll', 'o']
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")

    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool):
        raise InvalidArgumentError(
            f"chunk_size must be an integer, got {type(chunk_size).__name__}"
        )

    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be positive, got {chunk_size}")

    if not text:
        return []

    chunks = []
    start = 0
    current_bytes = 0

    # Only show progress for large inputs
    chars_progress = tqdm(
        enumerate(text),
        total=len(text),
        desc="Chunking text",
        unit="char",
        disable=len(text) < 1_000_000,
        leave=False,
    )

    for index, char in chars_progress:
        char_bytes = len(char.encode("utf-8"))
        if char_bytes > chunk_size:
            raise ChunkingError(
                f"Character {char!r} at index {index} needs {char_bytes} bytes, "
                f"more than chunk_size ({chunk_size})"
            )

        if current_bytes + char_bytes > chunk_size:
            chunks.append(text[start:index])
            start = index
            current_bytes = 0

        current_bytes += char_bytes

    chunks.append(text[start:])

    if not validate_groups(text, chunks):
        raise ValidationError(
            "Content validation failed: chunks do not preserve original text"
        )

    logger.debug(f"Chunked {len(text)} chars into {len(chunks)} pieces of <= {chunk_size} bytes")
    return chunks


def _apply_strategy(
    text: str,
    strategy: str,
    num_groups: int | None,
    chunk_size: int | None,
    delimiter: str | None,
) -> list[str]:
    """
    Apply the named splitting strategy to text.

    Raises:
        InvalidArgumentError: If the strategy is unknown or its parameter is missing
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")

    if strategy == "balanced":
        if num_groups is None:
            raise InvalidArgumentError("num_groups is required for the balanced strategy")
        return split_balanced(text, num_groups)

    elif strategy == "bytes":
        if chunk_size is None:
            raise InvalidArgumentError("chunk_size is required for the bytes strategy")
        return chunk_by_bytes(text, chunk_size)

    elif strategy == "delimiter":
        if delimiter is None:
            raise InvalidArgumentError("delimiter is required for the delimiter strategy")
        return split_all(text, delimiter)

    else:
        raise InvalidArgumentError(
            f"Unknown strategy: {strategy}. Available strategies: {', '.join(STRATEGIES)}"
        )


def process_documents(
    documents: dict[str, str],
    strategy: str,
    num_groups: int | None = None,
    chunk_size: int | None = None,
    delimiter: str | None = None,
) -> dict[str, Any]:
    """
    Split every document in a collection with one strategy.

    Failures are logged and reported per document instead of aborting the
    whole batch.

    Args:
        documents: Dictionary of doc_id -> text
        strategy: One of 'balanced', 'bytes', 'delimiter'
        num_groups: Number of groups (balanced strategy)
        chunk_size: Maximum bytes per piece (bytes strategy)
        delimiter: Separator to split on (delimiter strategy)

    Returns:
        ``{"results": {doc_id: {...}}, "errors": {doc_id: message}}``

    Raises:
        InvalidArgumentError: If documents is not a dictionary or the strategy is unknown
    """
    if not isinstance(documents, dict):
        raise InvalidArgumentError(
            f"documents must be a dictionary, got {type(documents).__name__}"
        )

    if strategy not in STRATEGIES:
        raise InvalidArgumentError(
            f"Unknown strategy: {strategy}. Available strategies: {', '.join(STRATEGIES)}"
        )

    results = {}
    errors = {}

    docs_progress = tqdm(
        documents.items(),
        desc="Processing documents",
        unit="doc",
        disable=len(documents) < 2,
    )

    for doc_id, text in docs_progress:
        try:
            groups = _apply_strategy(text, strategy, num_groups, chunk_size, delimiter)
            results[doc_id] = {
                "doc_id": doc_id,
                "original_length": len(text),
                "groups": groups,
                "stats": analyze_groups(groups),
                "strategy": strategy,
                "parameters": {
                    **({"num_groups": num_groups} if num_groups is not None else {}),
                    **({"chunk_size": chunk_size} if chunk_size is not None else {}),
                    **({"delimiter": delimiter} if delimiter is not None else {}),
                },
            }

        except (InvalidArgumentError, ChunkingError, ValidationError) as e:
            error_msg = f"{type(e).__name__}: {e}"
            logger.warning(f"Processing document '{doc_id}' failed: {error_msg}")
            errors[doc_id] = error_msg

    return {"results": results, "errors": errors}
