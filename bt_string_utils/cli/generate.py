"""
Command-line interface for generating URL-safe random strings.

Usage:
    python -m bt_string_utils random --length 32
    python -m bt_string_utils random --count 5 --seed 42
"""

import argparse
import random
import sys

from bt_string_utils.config import get_config
from bt_string_utils.exceptions import ConfigurationError
from bt_string_utils.logging_config import get_logger, setup_logging
from bt_string_utils.strings import generate_random_string


logger = get_logger(__name__)


def generate_strings(length: int, count: int = 1, seed: int | None = None) -> list[str]:
    """
    Generate ``count`` random strings of ``length`` characters.

    A seed switches to a reproducible ``random.Random`` source; without one
    the operating system's CSPRNG is used.
    """
    rng = random.Random(seed) if seed is not None else None
    return [generate_random_string(length, rng=rng) for _ in range(count)]


def main() -> None:
    """Main entry point for the random CLI."""
    setup_logging(log_level="WARNING")

    try:
        config = get_config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    parser = argparse.ArgumentParser(
        prog="bt-strings random",
        description="Generate URL-safe random strings",
    )

    parser.add_argument(
        "--length",
        type=int,
        default=config.default_random_length,
        help=f"Characters per string (default: {config.default_random_length})",
    )

    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of strings to generate (default: 1)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible output (not for secrets)",
    )

    args = parser.parse_args()

    if args.length < 0:
        parser.error("--length must not be negative")

    if args.count <= 0:
        parser.error("--count must be positive")

    if args.seed is not None:
        logger.warning("Seeded output is predictable; do not use it for secrets")

    for value in generate_strings(args.length, args.count, args.seed):
        print(value)


if __name__ == "__main__":
    main()
