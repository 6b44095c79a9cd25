"""
Exception hierarchy for comention_graph.

Format errors abort the current file or run. Identity conflicts signal a defect
in entity resolution and are never recovered from.
"""


class ComentionGraphError(Exception):
    """Base class for all comention_graph errors."""


class FormatError(ComentionGraphError):
    """Structured input did not match the expected format."""


class CorpusFormatError(FormatError):
    """The parsed corpus handed to the indexer is malformed."""


class CacheFormatError(FormatError):
    """A co-mentions or aliases cache document is malformed."""


class IdentityConflictError(ComentionGraphError):
    """
    Two distinct entities share a canonical key, or a pair resolves to one entity.

    Raised as a hard failure: duplicate identities must already have been
    collapsed by entity resolution.
    """
