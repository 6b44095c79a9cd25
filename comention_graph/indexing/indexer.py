"""
Document co-mention indexer.

Walks the corpus in order, resolves every organization mention to a canonical
entity, and records which entities share a sentence. Only sentences naming at
least two distinct entities are kept; documents with none are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from tqdm import tqdm

from comention_graph.constants import MIN_ENTITIES_PER_SENTENCE
from comention_graph.corpus.models import ParsedDocument
from comention_graph.entity_resolution.registry import EntityHandle, EntityRegistry
from comention_graph.indexing.coreference import collect_mentions

logger = logging.getLogger(__name__)

SentenceEntities = tuple[EntityHandle, ...]


@dataclass(frozen=True)
class DocumentComentions:
    """
    Co-mention summary of one document.

    Attributes:
        total_sentences: Sentence count of the whole document
        interesting_sentences: Entity handles of each sentence naming two or
            more distinct entities, in first-mention order
    """

    total_sentences: int
    interesting_sentences: tuple[SentenceEntities, ...]


@dataclass
class IndexStats:
    """Counters collected while indexing a corpus."""

    documents_seen: int = 0
    documents_kept: int = 0
    mentions: int = 0
    cache_hits: int = 0
    entities_minted: int = 0
    skipped_spans: int = 0
    skipped_coreferences: int = 0

    @property
    def documents_dropped(self) -> int:
        return self.documents_seen - self.documents_kept


@dataclass
class CorpusIndex:
    """Kept documents by name, in corpus order, plus the registry they reference."""

    registry: EntityRegistry
    documents: dict[str, DocumentComentions] = field(default_factory=dict)
    stats: IndexStats = field(default_factory=IndexStats)

    def __len__(self) -> int:
        return len(self.documents)


class CoMentionIndexer:
    """
    Build per-document co-mention sets against a shared registry.

    Usage:
        indexer = CoMentionIndexer(EntityRegistry())
        index = indexer.index_corpus(documents)
    """

    def __init__(self, registry: EntityRegistry | None = None, show_progress: bool = False):
        self.registry = registry if registry is not None else EntityRegistry()
        self.show_progress = show_progress
        self.stats = IndexStats()

    def _resolve(self, mention: str) -> EntityHandle:
        self.stats.mentions += 1
        if self.registry.lookup(mention) is not None:
            self.stats.cache_hits += 1
        handle, minted = self.registry.resolve(mention)
        if minted:
            self.stats.entities_minted += 1
        return handle

    def index_document(self, doc: ParsedDocument) -> DocumentComentions | None:
        """
        Resolve the mentions of one document.

        Returns:
            The document's co-mention summary, or None if no sentence names
            two distinct entities
        """
        self.stats.documents_seen += 1
        collected = collect_mentions(doc)
        self.stats.skipped_spans += collected.skipped_spans
        self.stats.skipped_coreferences += collected.skipped_coreferences

        # Sentence index -> insertion-ordered set of handles
        by_sentence: dict[int, dict[EntityHandle, None]] = {}
        for mention in collected.mentions:
            handle = self._resolve(mention.text)
            by_sentence.setdefault(mention.sentence, {})[handle] = None

        interesting = tuple(
            tuple(by_sentence[sentence])
            for sentence in sorted(by_sentence)
            if len(by_sentence[sentence]) >= MIN_ENTITIES_PER_SENTENCE
        )
        if not interesting:
            logger.debug(f"No co-mentions in {doc.name}")
            return None

        self.stats.documents_kept += 1
        return DocumentComentions(
            total_sentences=doc.total_sentences,
            interesting_sentences=interesting,
        )

    def index_corpus(self, documents: Iterable[ParsedDocument]) -> CorpusIndex:
        """
        Index documents in order.

        Args:
            documents: Parsed documents; names must be unique

        Returns:
            CorpusIndex holding the kept documents and the registry
        """
        index = CorpusIndex(registry=self.registry, stats=self.stats)
        iterator = tqdm(
            documents,
            desc="Indexing co-mentions",
            unit="doc",
            disable=not self.show_progress,
        )
        for doc in iterator:
            comentions = self.index_document(doc)
            if comentions is not None:
                index.documents[doc.name] = comentions

        stats = self.stats
        logger.info(
            f"Indexed {stats.documents_seen} documents: {stats.documents_kept} kept, "
            f"{stats.documents_dropped} without co-mentions, "
            f"{len(self.registry)} entities from {stats.mentions} mentions"
        )
        if stats.skipped_spans or stats.skipped_coreferences:
            logger.warning(
                f"Skipped {stats.skipped_spans} out-of-range entity spans and "
                f"{stats.skipped_coreferences} mismatched coreference annotations"
            )
        return index
