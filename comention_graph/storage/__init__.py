"""
XML persistence for co-mention indexes, alias registries and networks.
"""

from comention_graph.storage.xml_codec import (
    read_aliases,
    read_comentions,
    write_aliases,
    write_comentions,
    write_network,
)

__all__ = [
    "read_aliases",
    "read_comentions",
    "write_aliases",
    "write_comentions",
    "write_network",
]
