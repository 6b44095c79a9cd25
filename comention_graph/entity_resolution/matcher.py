"""
Alias matching between an existing entity and a new surface mention.

Two strategies are tried in order:
1. Token deletion: after stripping affixes and punctuation, the shorter name
   equals the longer one with a few leading/trailing tokens deleted.
2. Acronym/portmanteau alignment (see acronyms.py).

The longer name always wins the canonical key. If the shorter name became the
key, "J.P. Morgan -> Morgan" could later match "Morgan -> Morgan Stanley";
keeping the longer name rejects "J.P. Morgan -> Morgan Stanley" because that
needs both an insertion and a deletion, and only all-insertion or
all-deletion edits establish equivalence.
"""

from __future__ import annotations

import logging

from comention_graph.entity_resolution.acronyms import (
    AcronymMatch,
    is_subset_portmanteau_or_acronym,
)
from comention_graph.entity_resolution.models import NamedEntity
from comention_graph.entity_resolution.normalization import (
    corporate_suffix,
    is_blank,
    is_important_token,
    join_tokens,
    remove_punct,
    split_tokens,
    strip_affixes,
)

logger = logging.getLogger(__name__)


def _clean_tokens(name: str) -> list[str]:
    return split_tokens(remove_punct(strip_affixes(name), periods=True))


def _is_mixed_edit(abbrev: str, full: str) -> bool:
    """
    Whether the abbreviation dropped a corporate suffix the full name lacks.

    "Warner Bros." against "Time Warner" deletes "Time" but inserts "Bros.".
    """
    suffix = corporate_suffix(abbrev)
    return bool(suffix) and suffix != corporate_suffix(full)


def _match_by_token_deletion(entity: NamedEntity, mention: str) -> bool | None:
    """
    Returns:
        True/False when one of the names is empty after cleaning (decided),
        True on a deletion match (entity updated), None to fall through.
    """
    name1 = entity.key
    clean1 = _clean_tokens(name1)
    clean2 = _clean_tokens(mention)

    if is_blank(clean1) and is_blank(clean2):
        if name1.lower() == mention.lower():
            entity.add(mention)
            return True
        return False
    if is_blank(clean1) or is_blank(clean2):
        return False

    if len(clean1) > len(clean2):
        to_shorten, abbrev = clean1, " ".join(clean2)
        abbrev_raw, full_raw = mention, name1
    else:
        to_shorten, abbrev = clean2, " ".join(clean1)
        abbrev_raw, full_raw = name1, mention

    # Initially tolerate one extra token at either end. A longer alias becomes
    # the key and inherits the deletions it needed; a shorter alias raises the
    # tolerance to what it needed.
    for front in range(entity.max_front_deletes + 2):
        for back in range(entity.max_back_deletes + 2):
            shorter = join_tokens(to_shorten, front, len(to_shorten) - back)
            # A lone unimportant token like "and" or "." is never an alias
            if front + 1 >= len(to_shorten) - back and not is_important_token(shorter):
                continue
            if shorter.lower() != abbrev.lower():
                continue
            if front + back > 0 and _is_mixed_edit(abbrev_raw, full_raw):
                continue

            if len(mention) > len(name1):
                entity.key = mention
                entity.max_front_deletes += front
                entity.max_back_deletes += back
            else:
                entity.max_front_deletes = max(entity.max_front_deletes, front)
                entity.max_back_deletes = max(entity.max_back_deletes, back)
            entity.add(mention)
            logger.debug(f"Token deletion match {name1!r} ~ {mention!r} (front={front}, back={back})")
            return True
    return None


def try_add_alias(entity: NamedEntity, mention: str) -> bool:
    """
    Decide whether a mention refers to an entity, and record it if so.

    Args:
        entity: Existing entity (mutated on acceptance)
        mention: Raw surface mention

    Returns:
        True if the mention was accepted as an alias
    """
    decided = _match_by_token_deletion(entity, mention)
    if decided is not None:
        return decided

    # Acronyms and portmanteaus have many false positives, so only prefixes
    # and suffixes are deleted here.
    outcome = is_subset_portmanteau_or_acronym(
        entity.key,
        mention,
        entity.max_front_deletes,
        entity.max_back_deletes,
    )
    if outcome is AcronymMatch.MENTION_IS_ABBREVIATION:
        entity.add(mention)
    elif outcome is AcronymMatch.KEY_IS_ABBREVIATION:
        entity.add(mention, new_key=mention)
    else:
        return False
    logger.debug(f"Acronym match {entity.key!r} ~ {mention!r}")
    return True


def merge(target: NamedEntity, other: NamedEntity) -> bool:
    """
    Fold `other` into `target` if target accepts other's key.

    On success every alias of `other` is added to `target`. The deletion
    tolerances of `other` are not carried over.
    """
    if not try_add_alias(target, other.key):
        return False
    for alias in other.aliases:
        target.add(alias)
    return True
