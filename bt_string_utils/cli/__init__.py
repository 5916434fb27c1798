"""Command-line entry points for bt_string_utils."""
