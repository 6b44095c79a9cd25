"""
Shared CLI utilities for comention_graph scripts.
"""

from comention_graph.cli.args import add_cache_arguments, add_execute_argument
from comention_graph.cli.logging import print_execute_header, setup_logging

__all__ = [
    "add_cache_arguments",
    "add_execute_argument",
    "print_execute_header",
    "setup_logging",
]
