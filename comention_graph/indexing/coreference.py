"""
Turn coreference chains into extra organization mentions.

A pronoun ("the company", "it") whose antecedent overlaps a tagged
organization span becomes one more occurrence of that organization, placed in
the pronoun's sentence and carrying the organization's own text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from comention_graph.corpus.models import AnnotatedSpan, Coreference, ParsedDocument, Span

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mention:
    """One occurrence of an organization name inside a document."""

    span: Span
    text: str

    @property
    def sentence(self) -> int:
        return self.span.sentence


def _matches_text(doc: ParsedDocument, entry: AnnotatedSpan) -> bool:
    return doc.text(entry) == entry.text


def derive_coreference_mentions(
    doc: ParsedDocument, coref: Coreference, mentions: list[Mention]
) -> Iterator[Mention]:
    """
    Yield mentions implied by one coreference entry.

    For every antecedent whose recorded text matches the document, every known
    mention intersecting it is repeated at each pronoun whose recorded text
    also matches. Entries whose text disagrees with the document are logged
    at DEBUG and skipped.

    Args:
        doc: The document the entry belongs to
        coref: The coreference entry
        mentions: Mentions known so far, explicit and derived, in order

    Yields:
        Derived mentions in antecedent, then mention, then pronoun order
    """
    for antecedent in coref.antecedents:
        if not _matches_text(doc, antecedent):
            logger.debug(f"Coreference mismatch in {doc.name}: antecedent {antecedent.text!r}")
            continue

        valid_pronouns = []
        for pronoun in coref.pronouns:
            if not _matches_text(doc, pronoun):
                logger.debug(f"Coreference mismatch in {doc.name}: pronoun {pronoun.text!r}")
                continue
            valid_pronouns.append(pronoun)

        for mention in mentions:
            if doc.intersects(mention.span, antecedent):
                for pronoun in valid_pronouns:
                    yield Mention(
                        span=Span(
                            sentence=pronoun.sentence,
                            start_token=pronoun.start_token,
                            end_token=pronoun.end_token,
                        ),
                        text=mention.text,
                    )


@dataclass
class DocumentMentions:
    """Mentions of one document plus counts of annotations that were skipped."""

    mentions: list[Mention]
    skipped_spans: int = 0
    skipped_coreferences: int = 0


def collect_mentions(doc: ParsedDocument) -> DocumentMentions:
    """
    All organization mentions of a document, explicit spans first.

    Derived mentions are appended as each coreference entry is processed, so a
    later entry may chain through a pronoun resolved by an earlier one.
    """
    result = DocumentMentions(mentions=[])
    for span in doc.entities:
        text = doc.text(span)
        if text is None:
            logger.debug(f"Entity span out of range in {doc.name}: {span}")
            result.skipped_spans += 1
            continue
        result.mentions.append(Mention(span=span, text=text))

    for coref in doc.coreferences:
        entries = [*coref.antecedents, *coref.pronouns]
        result.skipped_coreferences += sum(1 for e in entries if not _matches_text(doc, e))
        derived = list(derive_coreference_mentions(doc, coref, result.mentions))
        result.mentions.extend(derived)
    return result
