"""
Surface-form normalisation for organization names.

These helpers strip leading articles, trailing corporate suffixes and
punctuation noise so that "The Goldman, Sachs & Co." and "Goldman Sachs"
can be compared token by token. Tokenisation follows whitespace splitting
with trailing empty tokens discarded.
"""

from __future__ import annotations

import re

# Leading "The " (any case, possibly repeated)
PREFIX_PATTERN = re.compile(r"(?:[Tt][Hh][Ee] )+(.*)")

SUFFIX_PATTERN = re.compile(
    r"(.*?)"
    r"(?: (?:, )?(?:"
    # Ends with "and Company", or variations
    r"(?:(?:& ?|and )?[Cc]o(?:mpany| ?\.)?)"
    # Ends with a short abbreviation and a period e.g. Corp.
    r"|[^ ]{1,5}(?: ?\.)"
    # Ends with an all caps token e.g. PLC, RLLLP
    r"|[A-Z]{2,5}"
    r"))+"
)

IMPORTANT_TOKEN_PATTERN = re.compile(r"[A-Z].*")

# (pattern, replacement) pairs applied in order; "( |)X\1" collapses a
# punctuation token or joins an in-word punctuation mark.
_PUNCT_RULES: list[tuple[re.Pattern[str], str]] = [
    # Goldman, Sachs & Co. -> Goldman Sachs & Co.
    (re.compile(r" ,$"), ""),
    (re.compile(r"^, "), ""),
    (re.compile(r"( |),\1"), r"\1"),
    # Time-Warner -> TimeWarner
    (re.compile(r" -$"), ""),
    (re.compile(r"^- "), ""),
    (re.compile(r"( |)-\1"), r"\1"),
    # Dunkin' -> Dunkin
    (re.compile(r" '$"), ""),
    (re.compile(r"^' "), ""),
    (re.compile(r"( |)'\1"), r"\1"),
    # Guber/Peters -> GuberPeters
    (re.compile(r" /$"), ""),
    (re.compile(r"^/ "), ""),
    (re.compile(r"( |)/\1"), r"\1"),
    # Sachs & Co. -> Sachs and Co.
    (re.compile(r" &$"), " and"),
    (re.compile(r"^& "), "and "),
    (re.compile(r"( |)&\1"), " and "),
]

_PERIOD_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r" \.$"), ""),
    (re.compile(r"^\. "), ""),
    (re.compile(r"( |)\.\1"), r"\1"),
]

_SUFFIX_NOISE = re.compile(r"[\s.,]")


def remove_prefix(name: str) -> str:
    """Strip a leading "The " article."""
    match = PREFIX_PATTERN.fullmatch(name)
    return match.group(1) if match else name


def remove_suffix(name: str) -> str:
    """
    Strip trailing corporate-suffix tokens.

    Examples:
        "TRW Inc." -> "TRW"
        "Goldman Sachs & Co." -> "Goldman Sachs"
        "Christie 's International PLC" -> "Christie 's International"
        "TRW" -> "TRW" (a suffix needs a preceding token)
    """
    match = SUFFIX_PATTERN.fullmatch(name)
    return match.group(1) if match else name


def strip_affixes(name: str) -> str:
    """Strip the corporate suffix, then the leading article."""
    return remove_prefix(remove_suffix(name))


def corporate_suffix(name: str) -> str:
    """
    The suffix text removed by remove_suffix(), lowercased without spaces,
    periods or commas ("Warner Bros." -> "bros").
    """
    return _SUFFIX_NOISE.sub("", name[len(remove_suffix(name)) :]).lower()


def remove_punct(name: str, periods: bool) -> str:
    """
    Remove comma, hyphen, apostrophe and slash noise and spell out "&".

    Args:
        name: Raw name
        periods: Also remove periods (token-deletion matching does, acronym
            matching keeps them as delimiters)
    """
    for pattern, replacement in _PUNCT_RULES:
        name = pattern.sub(replacement, name)
    if periods:
        for pattern, replacement in _PERIOD_RULES:
            name = pattern.sub(replacement, name)
    return name


def is_important_token(token: str) -> bool:
    """Not an article, coordinate conjunction, preposition, or punctuation."""
    return IMPORTANT_TOKEN_PATTERN.fullmatch(token) is not None


def next_capital(token: str, start: int) -> int:
    """Index of the first uppercase character at or after start, or -1."""
    for i in range(start, len(token)):
        if token[i].isupper():
            return i
    return -1


def split_tokens(name: str) -> list[str]:
    """
    Split on single spaces, dropping trailing empty tokens.

    "" -> [""], " " -> [], "A  B " -> ["A", "", "B"]
    """
    if " " not in name:
        return [name]
    tokens = name.split(" ")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def join_tokens(tokens: list[str], start: int, end: int) -> str:
    """Join tokens[start:end] with spaces, clamping end to the token count."""
    end = min(end, len(tokens))
    if start >= end:
        return ""
    return " ".join(tokens[start:end])


def is_blank(tokens: list[str]) -> bool:
    return len(tokens) == 0 or (len(tokens) == 1 and tokens[0] == "")
