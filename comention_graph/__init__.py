"""
Comention Graph - organization co-mention networks from annotated news text.

This package provides utilities for:
- Resolving organization name variants (abbreviations, acronyms, suffixes)
- Indexing same-sentence co-mentions, including coreferenced pronouns
- Scoring entity pairs with normalized pointwise mutual information
- Caching indexes and writing networks as XML
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from comention_graph.config import get_settings
from comention_graph.entity_resolution import EntityRegistry, NamedEntity, merge, try_add_alias
from comention_graph.exceptions import (
    CacheFormatError,
    ComentionGraphError,
    CorpusFormatError,
    IdentityConflictError,
)
from comention_graph.network import EntityPair, filter_network, score_network
from comention_graph.pipeline import generate_network, load_or_build

__all__ = [
    "__version__",
    # Config
    "get_settings",
    # Entity resolution
    "EntityRegistry",
    "NamedEntity",
    "merge",
    "try_add_alias",
    # Network
    "EntityPair",
    "filter_network",
    "generate_network",
    "load_or_build",
    "score_network",
    # Errors
    "CacheFormatError",
    "ComentionGraphError",
    "CorpusFormatError",
    "IdentityConflictError",
]
