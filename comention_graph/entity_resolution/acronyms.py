"""
Acronym and portmanteau alignment.

E.g. "Aluminum Company of America" == "Alcoa", "American Express" == "Amex",
"Consolidated Rail" == "Conrail", "Atlantic and Pacific" == "A&P".

One name must be an abbreviated form of the other: the abbreviation is derived
from the full name purely by deletions, never by insertions or substitutions,
so "Amex Co." is not an abbreviation of "American Express". Spaces and periods
in the abbreviation may be skipped.
"""

from __future__ import annotations

from enum import IntEnum

from comention_graph.entity_resolution.normalization import (
    corporate_suffix,
    is_important_token,
    join_tokens,
    next_capital,
    remove_punct,
    split_tokens,
    strip_affixes,
)

NO_ALIGNMENT = -1
_DELIMITERS = " ."


class AcronymMatch(IntEnum):
    """Outcome of comparing an entity key (name1) with a mention (name2)."""

    NONE = 0
    # name2 is the abbreviation: alias only
    MENTION_IS_ABBREVIATION = 1
    # name1 is the abbreviation: name2 becomes the canonical key
    KEY_IS_ABBREVIATION = 2


def is_portmanteau_or_acronym(name1: str, name2: str, first_is_abbrev: bool) -> int:
    """
    Align an abbreviation against a full name character by character.

    Moves are tried in this order of preference:
      1. stay on the current full-name token and consume a matching character
      2. jump to a later token (current token unimportant, or already entered)
      3. on a space/period, jump to the next capital inside the current token
      4. on a capital, jump to the next capital inside the current token
    Untaken viable alternatives are saved on an explicit stack and retried when
    the walk reaches a character with no viable move.

    Args:
        name1: First name
        name2: Second name
        first_is_abbrev: Whether name1 is the abbreviation

    Returns:
        The number of trailing full-name tokens left unconsumed, or -1 if the
        abbreviation contains a character not found, in order, in the full name.
    """
    # Commas are insignificant and & becomes "and"
    name1 = remove_punct(name1, periods=False)
    name2 = remove_punct(name2, periods=False)

    if first_is_abbrev:
        abbrev, full_name = name1, split_tokens(name2)
    else:
        abbrev, full_name = name2, split_tokens(name1)
    if not full_name:
        return NO_ALIGNMENT

    # Saved states: (abbrev index, full-name token, offset within token)
    backtrack: list[tuple[int, int, int]] = []
    i = j = k = 0
    # Characters consumed from the current full-name token
    m = 0
    while i < len(abbrev):
        char = abbrev[i]
        token = full_name[j]
        has_next_character = k < len(token)
        capital = next_capital(token, k + 1)
        this_or_next_capital = (
            k if has_next_character and token[k].isupper() else capital
        )

        stay = has_next_character and char.lower() == token[k].lower()
        next_token = j + 1 < len(full_name) and (m != 0 or not is_important_token(token))
        delimiter_jump = m != 0 and char in _DELIMITERS and capital != -1
        capital_jump = m != 0 and char.isupper() and capital != -1

        if char.isupper():
            if stay and token[k].islower():
                # "TWA" != "Time Warner", "MCI" != "McDermott International"
                stay = False
            if (
                next_token
                and this_or_next_capital != -1
                and token[this_or_next_capital] != char
            ):
                # Must reach the next capital of this token before moving on
                next_token = False
            if capital_jump and has_next_character and token[k].isupper():
                # Never skip over a capital letter in the full name
                capital_jump = False

        if stay:
            if next_token:
                advance = 1
                while True:
                    if full_name[j + advance][:1].lower() == char.lower():
                        backtrack.append((i, j + advance, 0))
                    advance += 1
                    if not (
                        j + advance < len(full_name)
                        and not is_important_token(full_name[j + advance - 1])
                    ):
                        break
            if delimiter_jump:
                if i + 1 < len(abbrev) and abbrev[i + 1].upper() == token[capital]:
                    backtrack.append((i + 1, j, capital))
            if capital_jump:
                if char.upper() == token[capital]:
                    backtrack.append((i, j, capital))

            i += 1
            k += 1
            m += 1
        elif next_token:
            if delimiter_jump:
                if i + 1 < len(abbrev) and abbrev[i + 1].upper() == token[capital]:
                    backtrack.append((i + 1, j, capital))
            if capital_jump:
                if char.upper() == token[capital]:
                    backtrack.append((i, j, capital))

            if char in _DELIMITERS:
                i += 1
            j += 1
            k = 0
            m = 0
        elif delimiter_jump:
            if capital_jump:
                if char.upper() == token[capital]:
                    backtrack.append((i, j, capital))

            i += 1
            k = capital
            m = 0
        elif capital_jump:
            k = capital
            m = 0
        elif char in _DELIMITERS:
            i += 1
        elif backtrack:
            # m carries over from the abandoned branch
            i, j, k = backtrack.pop()
        else:
            return NO_ALIGNMENT

    if k != 0:
        j += 1
    return len(full_name) - j


def _aligns(name1: str, name2: str) -> bool:
    return is_portmanteau_or_acronym(name1, name2, len(name1) < len(name2)) == 0


def is_subset_portmanteau_or_acronym(
    name1: str,
    name2: str,
    max_front_deletes: int = 0,
    max_back_deletes: int = 0,
) -> AcronymMatch:
    """
    Try acronym alignment on raw names, then with affixes stripped.

    Only the leading article and trailing corporate suffix are ever removed,
    except for a last attempt that trims the stripped full name within the
    entity's own deletion window. That attempt needs an abbreviation spanning
    several tokens ("A&P" reads as "A and P") and keeps at least two full-name
    tokens.

    Args:
        name1: The entity's current key
        name2: The candidate mention
        max_front_deletes: The entity's leading-token deletion tolerance
        max_back_deletes: The entity's trailing-token deletion tolerance
    """
    first_is_abbrev = len(name1) < len(name2)
    matched = (
        AcronymMatch.KEY_IS_ABBREVIATION
        if first_is_abbrev
        else AcronymMatch.MENTION_IS_ABBREVIATION
    )

    if _aligns(name1, name2):
        return matched

    # Shorten only the full name
    if first_is_abbrev:
        if _aligns(name1, strip_affixes(name2)):
            return matched
    elif _aligns(strip_affixes(name1), name2):
        return matched

    # Shorten both names
    if _aligns(strip_affixes(name1), strip_affixes(name2)):
        return matched

    abbrev, full = (name1, name2) if first_is_abbrev else (name2, name1)
    if _trimmed_alignment(abbrev, full, max_front_deletes, max_back_deletes):
        return matched

    return AcronymMatch.NONE


def _trimmed_alignment(
    abbrev: str, full: str, max_front_deletes: int, max_back_deletes: int
) -> bool:
    abbrev_suffix = corporate_suffix(abbrev)
    if abbrev_suffix and abbrev_suffix != corporate_suffix(full):
        return False

    short = strip_affixes(abbrev)
    # Single-token acronyms like "NY" only name part of a full name
    if len(split_tokens(remove_punct(short, periods=False))) < 2:
        return False
    tokens = split_tokens(strip_affixes(full))
    for front in range(max_front_deletes + 2):
        for back in range(max_back_deletes + 2):
            if front == 0 and back == 0:
                continue
            if len(tokens) - front - back < 2:
                continue
            trimmed = join_tokens(tokens, front, len(tokens) - back)
            if len(short) >= len(trimmed):
                continue
            if is_portmanteau_or_acronym(short, trimmed, True) == 0:
                return True
    return False
