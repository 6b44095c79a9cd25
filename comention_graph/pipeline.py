"""
End-to-end network generation: corpus -> co-mention index (cached) -> scored edges.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from comention_graph.corpus.models import ParsedDocument
from comention_graph.entity_resolution.registry import EntityRegistry
from comention_graph.exceptions import ComentionGraphError
from comention_graph.indexing.indexer import CoMentionIndexer, DocumentComentions
from comention_graph.network.scoring import EntityPair, score_network
from comention_graph.storage.xml_codec import (
    read_aliases,
    read_comentions,
    write_aliases,
    write_comentions,
)

logger = logging.getLogger(__name__)

CorpusSource = Callable[[], Iterable[ParsedDocument]]


@dataclass
class CoMentionData:
    """A co-mention index together with the registry its handles refer to."""

    documents: dict[str, DocumentComentions]
    registry: EntityRegistry
    from_cache: bool = False


def needs_refresh(
    force_refresh: bool, comentions_path: Path | None, aliases_path: Path | None
) -> bool:
    """Whether the cache must be rebuilt from the corpus."""
    if force_refresh or comentions_path is None or aliases_path is None:
        return True
    return not (comentions_path.exists() and aliases_path.exists())


def load_or_build(
    corpus: CorpusSource | None,
    comentions_path: Path | None = None,
    aliases_path: Path | None = None,
    force_refresh: bool = False,
    show_progress: bool = False,
) -> CoMentionData:
    """
    Load the co-mention cache, or index the corpus and write the cache.

    A missing path means that cache document is written to stdout.

    Args:
        corpus: Loads the parsed corpus; only called when rebuilding
        comentions_path: Co-mention cache file
        aliases_path: Alias cache file
        force_refresh: Rebuild even if both cache files exist
        show_progress: Show a tqdm progress bar while indexing

    Raises:
        ComentionGraphError: If a rebuild is needed but no corpus was given
        CacheFormatError: If an existing cache file is malformed
    """
    if not needs_refresh(force_refresh, comentions_path, aliases_path):
        logger.info(f"Loading cached co-mentions from {comentions_path} and {aliases_path}")
        registry = read_aliases(aliases_path)
        documents = read_comentions(comentions_path, registry)
        return CoMentionData(documents=documents, registry=registry, from_cache=True)

    if corpus is None:
        raise ComentionGraphError("Co-mention cache must be rebuilt but no corpus was given")

    logger.info("Indexing corpus")
    indexer = CoMentionIndexer(EntityRegistry(), show_progress=show_progress)
    index = indexer.index_corpus(corpus())

    write_comentions(index.documents, index.registry, comentions_path)
    write_aliases(index.registry, aliases_path)
    return CoMentionData(documents=index.documents, registry=index.registry)


def generate_network(
    corpus: CorpusSource | None,
    comentions_path: Path | None = None,
    aliases_path: Path | None = None,
    force_refresh: bool = False,
    show_progress: bool = False,
) -> list[EntityPair]:
    """Load or build the co-mention index and score it."""
    data = load_or_build(
        corpus,
        comentions_path=comentions_path,
        aliases_path=aliases_path,
        force_refresh=force_refresh,
        show_progress=show_progress,
    )
    return score_network(data.documents, data.registry)
