#!/usr/bin/env python3
"""
Build an organization co-mention network.

Indexes a parsed corpus (or reuses the XML co-mention cache), scores every
co-mentioned pair with normalized PMI, and writes the network as XML.

Usage:
    python scripts/build_network.py comentions.xml aliases.xml --corpus corpus.jsonl
    python scripts/build_network.py comentions.xml aliases.xml --force-refresh --corpus corpus.jsonl
    python scripts/build_network.py comentions.xml aliases.xml --min-sentences 2 -o network.xml
"""

import sys

from comention_graph.cli.commands import run_build_network

if __name__ == "__main__":
    sys.exit(run_build_network())
