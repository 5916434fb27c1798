"""
Common utilities for CLI modules.
"""

import json
import sys
from pathlib import Path
from typing import Any


def read_input_texts(input_paths: list[str]) -> dict[str, str]:
    """
    Read every input file into a dictionary keyed by its path.

    A path of ``-`` reads standard input.

    Args:
        input_paths: Paths of UTF-8 text files

    Returns:
        Dictionary of path -> text, in the order given

    Raises:
        FileNotFoundError: If an input file does not exist
    """
    texts = {}
    for input_path in input_paths:
        if input_path == "-":
            texts["<stdin>"] = sys.stdin.read()
            continue

        with open(Path(input_path), encoding="utf-8", newline="") as f:
            texts[input_path] = f.read()

    return texts


def save_json_output(
    data: dict[str, Any], output_path: str, pretty: bool = True
) -> None:
    """
    Save data to JSON file with error handling.

    Args:
        data: Data to save
        output_path: Path to save the JSON file
        pretty: Whether to pretty-print the JSON
    """
    try:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        print(f"✅ Output saved to: {output_file}")

    except OSError as e:
        print(f"❌ Error saving output to {output_path}: {e}", file=sys.stderr)
        sys.exit(1)


def print_summary_stats(stats: dict[str, Any]) -> None:
    """
    Print formatted summary statistics.

    Args:
        stats: Statistics dictionary to display
    """
    print("\n📊 Summary Statistics:")
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"  {key}: {value:.1f}")
        else:
            print(f"  {key}: {value}")
