"""
Parsed corpus: documents, entity spans and coreference chains.
"""

from comention_graph.corpus.loader import load_corpus, parse_documents
from comention_graph.corpus.models import AnnotatedSpan, Coreference, ParsedDocument, Span

__all__ = [
    "AnnotatedSpan",
    "Coreference",
    "ParsedDocument",
    "Span",
    "load_corpus",
    "parse_documents",
]
