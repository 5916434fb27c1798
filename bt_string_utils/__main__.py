"""
Main entry point for bt_string_utils.

Enables: python -m bt_string_utils [command] [args]
"""

import sys

from bt_string_utils.logging_config import get_logger, setup_logging


logger = get_logger(__name__)


def main():
    """Main entry point that delegates to appropriate CLI modules."""
    # Basic logging for error messages; commands reconfigure it
    setup_logging(log_level="INFO")

    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1]

    # Remove the command from argv so submodules see the right arguments
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "split":
        from bt_string_utils.cli.split import main as split_main

        split_main()
    elif command == "count":
        from bt_string_utils.cli.count import main as count_main

        count_main()
    elif command == "random":
        from bt_string_utils.cli.generate import main as generate_main

        generate_main()
    elif command == "help" or command == "-h" or command == "--help":
        print_help()
    else:
        logger.error(f"Unknown command: {command}")
        print_help()
        sys.exit(1)


def print_help():
    """Print main help message."""
    print("bt-strings - string splitting and counting tools")
    print()
    print("Usage:")
    print("  python -m bt_string_utils <command> [options]")
    print()
    print("Available commands:")
    print("  split    Split text into balanced groups, byte-bounded pieces or segments")
    print("  count    Count words and paragraphs")
    print("  random   Generate URL-safe random strings")
    print("  help     Show this help message")
    print()
    print("Examples:")
    print("  python -m bt_string_utils split --input story.txt --strategy balanced --groups 4")
    print("  python -m bt_string_utils split --input story.txt --strategy bytes --size 1024")
    print("  python -m bt_string_utils count --input story.txt")
    print("  python -m bt_string_utils random --length 32")
    print()
    print("For command-specific help:")
    print("  python -m bt_string_utils split --help")
    print("  python -m bt_string_utils count --help")
    print("  python -m bt_string_utils random --help")


if __name__ == "__main__":
    main()
