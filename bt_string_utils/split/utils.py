"""
Utilities for group validation and analysis.
"""


def validate_groups(original_text: str, groups: list[str]) -> bool:
    """
    Verify that groups reproduce the original text when concatenated.

    Args:
        original_text: Original text before splitting
        groups: List of text groups

    Returns:
        True if groups preserve all original content, False otherwise
    """
    if not groups:
        return not original_text

    return "".join(groups) == original_text


def analyze_groups(groups: list[str]) -> dict:
    """
    Analyze group statistics for debugging and reporting.

    Args:
        groups: List of text groups

    Returns:
        Dictionary with group size and word-count statistics
    """
    # balanced imports this module at load time
    from .balanced import count_split_words

    if not groups:
        return {
            "num_groups": 0,
            "total_chars": 0,
            "avg_group_size": 0,
            "min_group_size": 0,
            "max_group_size": 0,
            "size_std": 0,
            "word_counts": [],
        }

    group_sizes = [len(group) for group in groups]
    total_chars = sum(group_sizes)
    avg_size = total_chars / len(groups)

    variance = sum((size - avg_size) ** 2 for size in group_sizes) / len(groups)
    std_dev = variance**0.5

    return {
        "num_groups": len(groups),
        "total_chars": total_chars,
        "avg_group_size": round(avg_size, 1),
        "min_group_size": min(group_sizes),
        "max_group_size": max(group_sizes),
        "size_std": round(std_dev, 1),
        "word_counts": [count_split_words(group) for group in groups],
    }


def preview_groups(groups: list[str], max_preview: int = 100) -> list[str]:
    """
    Create preview of groups for debugging (truncated for readability).

    Args:
        groups: List of text groups
        max_preview: Maximum characters to show per group

    Returns:
        List of truncated group previews
    """
    previews = []
    for i, group in enumerate(groups):
        preview = group if len(group) <= max_preview else group[:max_preview] + "..."

        # Make whitespace visible
        preview = (
            preview.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
        )
        previews.append(f"Group {i + 1}: {preview}")

    return previews
