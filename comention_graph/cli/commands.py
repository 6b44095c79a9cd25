"""
CLI command entry points for comention_graph.

These functions are registered as console scripts in pyproject.toml.
"""

import argparse
import sys

from pydantic import ValidationError

from comention_graph.cli.args import add_cache_arguments, add_execute_argument
from comention_graph.cli.logging import print_execute_header, setup_logging
from comention_graph.config import get_settings
from comention_graph.corpus.loader import load_corpus
from comention_graph.exceptions import ComentionGraphError
from comention_graph.network.scoring import filter_network
from comention_graph.pipeline import generate_network
from comention_graph.storage.xml_codec import write_network


def build_parser(settings) -> argparse.ArgumentParser:
    """Argument parser for comention-network, defaults taken from settings."""
    parser = argparse.ArgumentParser(
        description="Build an organization co-mention network scored by normalized PMI"
    )
    add_cache_arguments(parser)
    parser.add_argument(
        "--corpus",
        type=str,
        default=settings.corpus_path,
        help="Parsed corpus (.json or .jsonl), needed when the cache is rebuilt",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the network here instead of stdout",
    )
    parser.add_argument(
        "--min-sentences",
        type=int,
        default=settings.min_edge_sentences,
        help="Drop edges co-mentioned in fewer sentences",
    )
    parser.add_argument(
        "--min-weight",
        type=float,
        default=settings.min_edge_weight,
        help="Drop edges with a lower weight",
    )
    add_execute_argument(parser)
    return parser


def run_build_network(argv: list[str] | None = None) -> int:
    """Entry point for comention-network command."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging("build_network").error(f"Invalid COMENTION_* configuration: {e}")
        return 1
    args = build_parser(settings).parse_args(argv)

    logger = setup_logging("build_network", execute=args.execute, log_dir=settings.log_dir)

    comentions = args.comentions or settings.comentions_cache
    aliases = args.aliases or settings.aliases_cache
    corpus_path = args.corpus

    def corpus():
        return load_corpus(corpus_path)

    print_execute_header("Building co-mention network", logger)
    try:
        pairs = generate_network(
            corpus if corpus_path else None,
            comentions_path=comentions,
            aliases_path=aliases,
            force_refresh=args.force_refresh,
            show_progress=sys.stderr.isatty(),
        )
        pairs = filter_network(pairs, min_sentences=args.min_sentences, min_weight=args.min_weight)
        write_network(pairs, args.output)
    except (ComentionGraphError, OSError) as e:
        logger.error(f"Failed to build network: {e}")
        return 1

    logger.info(f"✓ Wrote {len(pairs)} edges" + (f" to {args.output}" if args.output else ""))
    return 0
