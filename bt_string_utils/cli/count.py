"""
Command-line interface for word and paragraph counts.

Usage:
    python -m bt_string_utils count --input story.txt
    cat story.txt | python -m bt_string_utils count --input -
"""

import argparse
import sys
from typing import Any

from bt_string_utils.counting import count_paragraphs, word_count
from bt_string_utils.logging_config import get_logger, setup_logging

from .common import print_summary_stats, read_input_texts, save_json_output


logger = get_logger(__name__)


def count_texts(texts: dict[str, str]) -> dict[str, Any]:
    """
    Count words and paragraphs of every text.

    Returns:
        Dictionary with per-document counts and totals
    """
    documents = {}
    for doc_id, text in texts.items():
        documents[doc_id] = {
            "words": word_count(text),
            "paragraphs": count_paragraphs(text),
            "characters": len(text),
        }
        logger.info(
            f"{doc_id}: {documents[doc_id]['words']} words, "
            f"{documents[doc_id]['paragraphs']} paragraphs"
        )

    totals = {
        "total_documents": len(documents),
        "total_words": sum(d["words"] for d in documents.values()),
        "total_paragraphs": sum(d["paragraphs"] for d in documents.values()),
        "total_characters": sum(d["characters"] for d in documents.values()),
    }

    return {"documents": documents, "totals": totals}


def main() -> None:
    """Main entry point for the count CLI."""
    verbose = "--verbose" in sys.argv or "-v" in sys.argv
    setup_logging(log_level="INFO", verbose=verbose)

    parser = argparse.ArgumentParser(
        prog="bt-strings count",
        description="Count words and paragraphs in text files",
    )

    parser.add_argument(
        "--input",
        nargs="+",
        required=True,
        help="Input text files ('-' reads stdin)",
    )

    parser.add_argument(
        "--output",
        help="Output file path (JSON format)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging with timestamps and module names",
    )

    args = parser.parse_args()

    try:
        texts = read_input_texts(args.input)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        sys.exit(1)

    counts = count_texts(texts)
    print_summary_stats(counts["totals"])

    if args.output:
        save_json_output(counts, args.output)


if __name__ == "__main__":
    main()
