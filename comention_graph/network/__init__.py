"""
Co-mention network scoring.
"""

from comention_graph.network.pairs import pairwise
from comention_graph.network.scoring import (
    EntityPair,
    FrequencyTables,
    Rational,
    count_frequencies,
    filter_network,
    npmi,
    pair_term_frequencies,
    score_network,
)

__all__ = [
    "EntityPair",
    "FrequencyTables",
    "Rational",
    "count_frequencies",
    "filter_network",
    "npmi",
    "pair_term_frequencies",
    "pairwise",
    "score_network",
]
