"""
Data model for resolved organization entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class NamedEntity:
    """
    Canonical identity of one organization.

    `key` is the longest alias accepted so far. `aliases` preserves insertion
    order and only grows. The deletion tolerances record how many leading and
    trailing tokens have been tolerated when matching aliases, and never shrink.

    Instances compare by identity; order by `key` with sort_key().
    """

    key: str
    aliases: dict[str, None] = field(default_factory=dict)
    max_front_deletes: int = 0
    max_back_deletes: int = 0

    def __post_init__(self) -> None:
        # The key is always the first alias
        self.aliases = {self.key: None, **self.aliases}

    def add(self, alias: str, new_key: str | None = None) -> None:
        """Record an alias, optionally promoting a new canonical key."""
        if new_key is not None:
            self.key = new_key
        self.aliases.setdefault(alias, None)

    def alias_list(self) -> list[str]:
        return list(self.aliases)

    def sort_key(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"[{self.key}]"
