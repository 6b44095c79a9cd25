"""
Entity registry: an arena of NamedEntity slots addressed by integer handle.

Documents and sentence sets hold handles rather than key strings, so canonical
key rewrites made during resolution are observed everywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from comention_graph.entity_resolution.matcher import try_add_alias
from comention_graph.entity_resolution.models import NamedEntity
from comention_graph.exceptions import IdentityConflictError

logger = logging.getLogger(__name__)

EntityHandle = int


class EntityRegistry:
    """
    Resolves surface mentions to canonical entities.

    Resolution is order-dependent: each accepted mention can change an
    entity's key and deletion tolerances, which changes what it accepts next.
    Feed mentions in a single reproducible order.
    """

    def __init__(self) -> None:
        self._entities: list[NamedEntity] = []
        # Lowercase surface string -> handle of the entity that accepted it
        self._mentions: dict[str, EntityHandle] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[NamedEntity]:
        return iter(self._entities)

    def get(self, handle: EntityHandle) -> NamedEntity:
        return self._entities[handle]

    def key(self, handle: EntityHandle) -> str:
        return self._entities[handle].key

    def handles(self) -> range:
        return range(len(self._entities))

    def entities(self) -> list[NamedEntity]:
        return list(self._entities)

    def mint(self, mention: str) -> EntityHandle:
        """Create a new entity whose key is the mention."""
        return self.add_entity(NamedEntity(mention))

    def add_entity(self, entity: NamedEntity) -> EntityHandle:
        handle = len(self._entities)
        self._entities.append(entity)
        self.remember(entity.key, handle)
        return handle

    def lookup(self, mention: str) -> EntityHandle | None:
        """Handle previously resolved for this exact (case-insensitive) mention."""
        return self._mentions.get(mention.lower())

    def remember(self, mention: str, handle: EntityHandle) -> None:
        self._mentions[mention.lower()] = handle

    def resolve(self, mention: str) -> tuple[EntityHandle, bool]:
        """
        Resolve a mention to an entity, minting one if nothing accepts it.

        Order of attempts: exact mention cache, then every known entity in
        discovery order via try_add_alias(), then a new entity.

        Returns:
            Tuple of (handle, minted)
        """
        cached = self.lookup(mention)
        if cached is not None:
            return cached, False

        for handle, entity in enumerate(self._entities):
            if try_add_alias(entity, mention):
                self.remember(mention, handle)
                return handle, False

        handle = self.mint(mention)
        logger.debug(f"New entity {mention!r}")
        return handle, True

    def by_key(self) -> dict[str, EntityHandle]:
        """
        Map canonical keys to handles.

        Raises:
            IdentityConflictError: If two distinct entities share a key
        """
        keys: dict[str, EntityHandle] = {}
        for handle, entity in enumerate(self._entities):
            previous = keys.setdefault(entity.key, handle)
            if previous != handle:
                raise IdentityConflictError(
                    f"Different entities with same key {entity.key!r} "
                    f"(handles {previous} and {handle})"
                )
        return keys

    @classmethod
    def from_aliases(cls, entries: Iterable[tuple[str, Iterable[str]]]) -> EntityRegistry:
        """
        Rebuild a registry from (key, aliases) entries.

        Deletion tolerances are not persisted and restart at zero.
        """
        registry = cls()
        for key, aliases in entries:
            entity = NamedEntity(key, aliases=dict.fromkeys([key, *aliases]))
            handle = registry.add_entity(entity)
            for alias in entity.aliases:
                registry.remember(alias, handle)
        return registry
