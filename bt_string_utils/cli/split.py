"""
Command-line interface for splitting text files.

Usage:
    python -m bt_string_utils split --input story.txt --strategy balanced --groups 4
    python -m bt_string_utils split --input a.txt b.txt --strategy bytes --size 1024
    python -m bt_string_utils split --input data.csv --strategy delimiter --delimiter ","
"""

import argparse
import sys
import time
from typing import Any

from bt_string_utils.config import get_config
from bt_string_utils.exceptions import ConfigurationError, InvalidArgumentError
from bt_string_utils.logging_config import get_logger, setup_logging
from bt_string_utils.split import STRATEGIES, preview_groups, process_documents

from .common import print_summary_stats, read_input_texts, save_json_output


logger = get_logger(__name__)


def split_texts(
    texts: dict[str, str],
    strategy: str,
    num_groups: int | None = None,
    chunk_size: int | None = None,
    delimiter: str | None = None,
    output_path: str | None = None,
    preview: bool = False,
) -> dict[str, Any]:
    """
    CLI wrapper for splitting texts with progress logging and file output.

    Args:
        texts: Dictionary of source name -> text
        strategy: Splitting strategy ('balanced', 'bytes', 'delimiter')
        num_groups: Number of groups (balanced)
        chunk_size: Maximum bytes per piece (bytes)
        delimiter: Separator (delimiter)
        output_path: Path to save the JSON results
        preview: Whether to log group previews

    Returns:
        Dictionary with results, errors and statistics
    """
    _log_strategy_info(strategy, num_groups, chunk_size, delimiter)

    processing = process_documents(
        texts,
        strategy,
        num_groups=num_groups,
        chunk_size=chunk_size,
        delimiter=delimiter,
    )
    results = processing["results"]
    errors = processing["errors"]

    for i, (doc_id, result) in enumerate(results.items(), 1):
        logger.info(f"[{i}/{len(results)}] {doc_id}: {result['stats']['num_groups']} groups")
        if preview:
            for prev in preview_groups(result["groups"][:3]):
                logger.info(f"Preview: {prev}")
            if len(result["groups"]) > 3:
                logger.info(f"... and {len(result['groups']) - 3} more groups")

    for doc_id, error in errors.items():
        logger.error(f"Error processing {doc_id}: {error}")

    overall_stats = _calculate_overall_statistics(results, errors)
    print_summary_stats(overall_stats)

    output_data = {
        "strategy": strategy,
        "overall_stats": overall_stats,
        "documents": results,
        "errors": errors,
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
    }

    if output_path:
        save_json_output(output_data, output_path)

    return output_data


def _log_strategy_info(
    strategy: str, num_groups: int | None, chunk_size: int | None, delimiter: str | None
) -> None:
    logger.info(f"Splitting strategy: {strategy}")
    if strategy == "balanced":
        logger.info(f"Target number of groups: {num_groups}")
    elif strategy == "bytes":
        logger.info(f"Maximum piece size: {chunk_size} bytes")
    else:
        logger.info(f"Delimiter: {delimiter!r}")


def _calculate_overall_statistics(results: dict, errors: dict) -> dict[str, Any]:
    """Calculate overall statistics from splitting results."""
    total_groups = sum(r["stats"]["num_groups"] for r in results.values())
    total_chars = sum(r["original_length"] for r in results.values())

    return {
        "total_documents": len(results),
        "total_groups": total_groups,
        "total_characters": total_chars,
        "avg_groups_per_document": round(total_groups / len(results), 1) if results else 0,
        "error_count": len(errors),
    }


def main() -> None:
    """Main entry point for the split CLI."""
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    try:
        config = get_config()
    except ConfigurationError as e:
        setup_logging(verbose=verbose)
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(log_level=config.log_level, verbose=verbose)

    parser = argparse.ArgumentParser(
        prog="bt-strings split",
        description="Split text files into balanced groups or bounded pieces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four groups with balanced word counts
  python -m bt_string_utils split --input story.txt --strategy balanced --groups 4

  # Pieces of at most 1 KiB of UTF-8
  python -m bt_string_utils split --input story.txt --strategy bytes --size 1024

  # Read from stdin and save results
  cat story.txt | python -m bt_string_utils split --input - --output out.json
        """,
    )

    parser.add_argument(
        "--input",
        nargs="+",
        required=True,
        help="Input text files ('-' reads stdin)",
    )

    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="balanced",
        help="Splitting strategy to use (default: balanced)",
    )

    parser.add_argument(
        "--groups",
        type=int,
        default=config.default_num_groups,
        help=f"Number of groups for balanced (default: {config.default_num_groups})",
    )

    parser.add_argument(
        "--size",
        type=int,
        default=config.default_chunk_size,
        help=f"Maximum bytes per piece for bytes (default: {config.default_chunk_size})",
    )

    parser.add_argument(
        "--delimiter",
        default="\n",
        help="Separator for delimiter (default: newline)",
    )

    parser.add_argument(
        "--output",
        help="Output file path (JSON format)",
    )

    parser.add_argument(
        "--save",
        action="store_true",
        help="Save results under the configured outputs directory",
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show group previews during processing",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging with timestamps and module names",
    )

    args = parser.parse_args()

    if args.strategy == "balanced" and args.groups <= 0:
        parser.error("--groups must be positive")

    if args.strategy == "bytes" and args.size <= 0:
        parser.error("--size must be positive")

    if args.save and not args.output:
        config.ensure_directories()
        args.output = str(config.outputs_dir / f"{args.strategy}_groups.json")

    try:
        texts = read_input_texts(args.input)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        sys.exit(1)

    try:
        output_data = split_texts(
            texts,
            strategy=args.strategy,
            num_groups=args.groups if args.strategy == "balanced" else None,
            chunk_size=args.size if args.strategy == "bytes" else None,
            delimiter=args.delimiter if args.strategy == "delimiter" else None,
            output_path=args.output,
            preview=args.preview,
        )
    except InvalidArgumentError as e:
        logger.error(f"Invalid arguments: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Splitting interrupted by user")
        sys.exit(1)

    if output_data["errors"]:
        sys.exit(1)

    logger.info("Splitting completed successfully!")


if __name__ == "__main__":
    main()
