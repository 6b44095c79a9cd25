"""
Co-mention indexing: mention resolution and per-sentence entity sets.
"""

from comention_graph.indexing.coreference import (
    DocumentMentions,
    Mention,
    collect_mentions,
    derive_coreference_mentions,
)
from comention_graph.indexing.indexer import (
    CoMentionIndexer,
    CorpusIndex,
    DocumentComentions,
    IndexStats,
)

__all__ = [
    "CoMentionIndexer",
    "CorpusIndex",
    "DocumentComentions",
    "DocumentMentions",
    "IndexStats",
    "Mention",
    "collect_mentions",
    "derive_coreference_mentions",
]
