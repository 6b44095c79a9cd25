"""
Logging utilities for comention_graph CLI.

Provides logging setup and header printing functions with tqdm compatibility.
Console output goes to stderr; stdout is reserved for XML output.
"""

import logging
import sys
import time
from pathlib import Path

from comention_graph.utils.tqdm_logging import TqdmLoggingHandler


def setup_logging(
    script_name: str,
    execute: bool = False,
    log_dir: Path = Path("logs"),
    tqdm_compatible: bool = True,
) -> logging.Logger:
    """
    Set up logging for a script.

    Args:
        script_name: Name of the script (for log file naming)
        execute: If True, log to file + console. If False, only console.
        log_dir: Directory for log files
        tqdm_compatible: If True, use TqdmLoggingHandler for clean progress bar output

    Returns:
        Configured logger instance
    """
    if execute:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{script_name}_{timestamp}.log"

        # Create logger with script name (not __name__) for better identification
        logger = logging.getLogger(script_name)
        logger.setLevel(logging.DEBUG)
        logger.handlers = []

        # File handler: DEBUG and above, including annotation mismatches
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

        # Console handler: INFO and above (summary only)
        console_formatter = logging.Formatter("%(message)s")
        if tqdm_compatible:
            console_handler = TqdmLoggingHandler(level=logging.INFO)
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.propagate = False

        # Route package loggers (comention_graph.indexing.*, ...) through the
        # same handlers instead of the root logger
        pkg_logger = logging.getLogger("comention_graph")
        pkg_logger.setLevel(logging.DEBUG)
        pkg_logger.handlers = []
        pkg_logger.addHandler(file_handler)
        pkg_console_handler = (
            TqdmLoggingHandler(level=logging.INFO)
            if tqdm_compatible
            else logging.StreamHandler(sys.stderr)
        )
        pkg_console_handler.setLevel(logging.INFO)
        pkg_console_handler.setFormatter(console_formatter)
        pkg_logger.addHandler(pkg_console_handler)
        pkg_logger.propagate = False

        logger.info(f"Log file: {log_file}")
        return logger
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            stream=sys.stderr,
        )
        return logging.getLogger(script_name)


def print_execute_header(title: str, logger: logging.Logger | None = None):
    """
    Print a standard section header.

    Args:
        title: Title for the section
        logger: Optional logger instance
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(title)
    logger.info("=" * 70)
