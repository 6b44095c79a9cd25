"""
Unordered pair iteration over a sentence's entity set.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from comention_graph.exceptions import IdentityConflictError

T = TypeVar("T")


def pairwise(entities: Sequence[T], key: Callable[[T], str]) -> Iterator[tuple[T, T]]:
    """
    Yield every unordered pair exactly once, smaller key first.

    Pairs come out in (i, j) index order, i < j.

    Args:
        entities: Distinct entities of one sentence
        key: Canonical key of an entity

    Raises:
        IdentityConflictError: If two entities in the set share a key
    """
    for i in range(len(entities)):
        for j in range(i + 1, len(entities)):
            first, second = entities[i], entities[j]
            first_key, second_key = key(first), key(second)
            if first_key < second_key:
                yield first, second
            elif first_key > second_key:
                yield second, first
            else:
                raise IdentityConflictError(f"Different entities with same key {first_key!r}")
