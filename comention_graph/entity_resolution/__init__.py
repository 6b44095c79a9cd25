"""
Entity Resolution Module.

Decides from surface text alone whether two organization mentions denote the
same entity, and keeps the canonical identity of every entity discovered.

- Normalisation (article/suffix/punctuation stripping)
- Token-deletion matching with ratcheting tolerances
- Acronym/portmanteau alignment with backtracking
- Registry of entities addressed by stable handles
"""

from comention_graph.entity_resolution.acronyms import (
    AcronymMatch,
    is_portmanteau_or_acronym,
    is_subset_portmanteau_or_acronym,
)
from comention_graph.entity_resolution.matcher import merge, try_add_alias
from comention_graph.entity_resolution.models import NamedEntity
from comention_graph.entity_resolution.registry import EntityHandle, EntityRegistry

__all__ = [
    # Model
    "NamedEntity",
    # Matching
    "try_add_alias",
    "merge",
    "AcronymMatch",
    "is_portmanteau_or_acronym",
    "is_subset_portmanteau_or_acronym",
    # Registry
    "EntityHandle",
    "EntityRegistry",
]
