"""
Network scoring with normalized pointwise mutual information.

The probability space is the set of (entity, interesting sentence)
memberships, so corpus size is the sum of interesting-sentence sizes rather
than a sentence or document count.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from comention_graph.entity_resolution.models import NamedEntity
from comention_graph.entity_resolution.registry import EntityHandle, EntityRegistry
from comention_graph.exceptions import IdentityConflictError
from comention_graph.indexing.indexer import DocumentComentions
from comention_graph.network.pairs import pairwise

logger = logging.getLogger(__name__)

HandlePair = tuple[EntityHandle, EntityHandle]


@dataclass
class Rational:
    """Mutable fraction used as a frequency accumulator."""

    numerator: int
    denominator: int = 1

    def increment(self) -> None:
        self.numerator += 1

    def __int__(self) -> int:
        return self.numerator // self.denominator

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return str(float(self))


@dataclass
class FrequencyTables:
    """
    Corpus-wide counts for scoring.

    Attributes:
        entity: Interesting sentences naming each entity
        pair: Interesting sentences naming both entities of a pair
        pair_documents: Documents with at least one such sentence
        corpus_size: Total (entity, sentence) memberships
    """

    entity: dict[EntityHandle, Rational] = field(default_factory=dict)
    pair: dict[HandlePair, Rational] = field(default_factory=dict)
    pair_documents: dict[HandlePair, Rational] = field(default_factory=dict)
    corpus_size: int = 0


def _count(table: dict, item) -> None:
    counter = table.get(item)
    if counter is None:
        table[item] = Rational(1)
    else:
        counter.increment()


def count_frequencies(
    documents: Mapping[str, DocumentComentions], registry: EntityRegistry
) -> FrequencyTables:
    """
    Accumulate entity, pair and pair-document frequencies in one pass.

    Raises:
        IdentityConflictError: If a sentence holds two entities with the same key
    """
    tables = FrequencyTables()
    for document in documents.values():
        pairs_in_document: dict[HandlePair, None] = {}
        for sentence in document.interesting_sentences:
            for handle in sentence:
                _count(tables.entity, handle)
            tables.corpus_size += len(sentence)
            for pair in pairwise(sentence, registry.key):
                _count(tables.pair, pair)
                pairs_in_document[pair] = None
        for pair in pairs_in_document:
            _count(tables.pair_documents, pair)
    return tables


def npmi(pair_frequency: float, x_frequency: float, y_frequency: float, corpus_size: int) -> float:
    """
    Normalized pointwise mutual information of a pair.

    Args:
        pair_frequency: Joint occurrences
        x_frequency: Occurrences of the first entity
        y_frequency: Occurrences of the second entity
        corpus_size: Size of the probability space

    Returns:
        A weight in [-1, 1]; 1 when the two entities only ever occur together
    """
    prob_joint = pair_frequency / corpus_size
    prob_x = x_frequency / corpus_size
    prob_y = y_frequency / corpus_size
    pmi = math.log2(prob_joint / (prob_x * prob_y))
    # PMI of perfectly correlated entities is higher when they are rarer
    return pmi / -math.log2(prob_joint)


@dataclass(frozen=True, eq=False)
class EntityPair:
    """Scored edge between two entities, `a.key < b.key`."""

    a: NamedEntity
    b: NamedEntity
    weight: float
    sentences: int
    documents: int

    def sort_key(self) -> tuple[float, int, int, str, str]:
        return (self.weight, self.sentences, self.documents, self.a.key, self.b.key)

    def __lt__(self, other: EntityPair) -> bool:
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"EntityPair(weight={self.weight:.2f}, a={self.a!r}, b={self.b!r})"


def score_network(
    documents: Mapping[str, DocumentComentions], registry: EntityRegistry
) -> list[EntityPair]:
    """
    Score every co-mentioned pair.

    Args:
        documents: Co-mention summaries by document name
        registry: Registry the summaries' handles refer to

    Returns:
        Edges in ascending (weight, sentences, documents, a.key, b.key) order

    Raises:
        IdentityConflictError: If two distinct entities share a key
    """
    tables = count_frequencies(documents, registry)

    edges = []
    for (a, b), frequency in tables.pair.items():
        weight = npmi(
            float(frequency),
            float(tables.entity[a]),
            float(tables.entity[b]),
            tables.corpus_size,
        )
        edges.append(
            EntityPair(
                a=registry.get(a),
                b=registry.get(b),
                weight=weight,
                sentences=int(frequency),
                documents=int(tables.pair_documents[(a, b)]),
            )
        )

    edges.sort(key=EntityPair.sort_key)
    for previous, current in zip(edges, edges[1:]):
        if previous.sort_key() == current.sort_key():
            raise IdentityConflictError(
                f"Distinct edges compare equal: {previous!r} and {current!r}"
            )

    logger.info(
        f"Scored {len(edges)} edges between {len(tables.entity)} entities "
        f"(corpus size {tables.corpus_size})"
    )
    return edges


def filter_network(
    pairs: Iterable[EntityPair], min_sentences: int = 0, min_weight: float | None = None
) -> list[EntityPair]:
    """
    Keep edges supported by enough sentences and, optionally, a minimum weight.

    Input order is preserved.
    """
    return [
        pair
        for pair in pairs
        if pair.sentences >= min_sentences and (min_weight is None or pair.weight >= min_weight)
    ]


def pair_term_frequencies(
    document: DocumentComentions, registry: EntityRegistry
) -> dict[HandlePair, Rational]:
    """
    Share of a document's interesting sentences that co-mention each pair.

    Not used for edge weights.
    """
    sentences = document.interesting_sentences
    frequencies: dict[HandlePair, Rational] = {}
    for sentence in sentences:
        for pair in pairwise(sentence, registry.key):
            counter = frequencies.get(pair)
            if counter is None:
                frequencies[pair] = Rational(1, len(sentences))
            else:
                counter.increment()
    return frequencies
