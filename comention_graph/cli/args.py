"""
Argument parsing utilities for comention_graph CLI.

Provides standard argument patterns used across scripts.
"""

from pathlib import Path


def add_execute_argument(parser):
    """
    Add standard --execute argument to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Also write a DEBUG log file under the log directory",
    )


def add_cache_arguments(parser):
    """
    Add --force-refresh and the positional co-mention/alias cache paths.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--force-refresh",
        action="store_true",
        help="Rebuild the co-mention cache from the corpus even if it exists",
    )
    parser.add_argument(
        "comentions",
        nargs="?",
        type=Path,
        help="Co-mention cache file (written to stdout when omitted)",
    )
    parser.add_argument(
        "aliases",
        nargs="?",
        type=Path,
        help="Alias cache file (written to stdout when omitted)",
    )
