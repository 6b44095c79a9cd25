"""
Parsed-corpus models handed over by the document and coreference parsers.

A document is a list of tokenised sentences, the token spans tagged as
organizations, and coreference chains tying pronoun spans to antecedent spans.
Span offsets are 0-based with an exclusive end; an end offset past the end of
its sentence continues into the following sentences.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Span(BaseModel):
    """Token range anchored at a sentence."""

    model_config = ConfigDict(frozen=True)

    sentence: int = Field(ge=0, description="Sentence index the span starts in")
    start_token: int = Field(ge=0, description="First token (inclusive)")
    end_token: int = Field(description="Last token (exclusive), relative to `sentence`")

    @model_validator(mode="after")
    def check_order(self) -> Span:
        if self.end_token <= self.start_token:
            raise ValueError(
                f"end_token ({self.end_token}) must be greater than start_token ({self.start_token})"
            )
        return self


class AnnotatedSpan(Span):
    """Span carrying the literal text the annotator recorded for it."""

    text: str


class Coreference(BaseModel):
    """One coreference entry: antecedent mention(s) and the proforms naming them."""

    model_config = ConfigDict(frozen=True)

    antecedents: list[AnnotatedSpan] = Field(min_length=1)
    pronouns: list[AnnotatedSpan] = Field(min_length=1)


class ParsedDocument(BaseModel):
    """A document as produced by the external parsing layer."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    sentences: list[list[str]]
    entities: list[Span] = Field(default_factory=list)
    coreferences: list[Coreference] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip whitespace from document names."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("sentences")
    @classmethod
    def no_empty_sentences(cls, v: list[list[str]]) -> list[list[str]]:
        for index, sentence in enumerate(v):
            if not sentence:
                raise ValueError(f"sentence {index} has no tokens")
        return v

    @property
    def total_sentences(self) -> int:
        return len(self.sentences)

    def tokens(self, span: Span) -> list[str] | None:
        """
        Tokens covered by a span.

        Returns:
            The tokens, or None if the span starts after the last sentence or
            runs past the end of the document.
        """
        sentences = self.sentences
        sentence, start, end = span.sentence, span.start_token, span.end_token
        if sentence >= len(sentences):
            return None

        if end <= len(sentences[sentence]):
            # Span is on one sentence
            return list(sentences[sentence][start:end])

        # Span may start in a following sentence
        while sentence < len(sentences) and start >= len(sentences[sentence]):
            start -= len(sentences[sentence])
            end -= len(sentences[sentence])
            sentence += 1

        # Span is split over several sentences
        tokens: list[str] = []
        while sentence < len(sentences) and end > 0:
            length = len(sentences[sentence])
            tokens.extend(sentences[sentence][start : min(end, length)])
            end -= length
            start = 0
            sentence += 1

        return None if end > 0 else tokens

    def text(self, span: Span) -> str | None:
        """Space-joined tokens of a span, or None if the span is out of range."""
        tokens = self.tokens(span)
        return None if tokens is None else " ".join(tokens)

    def intersects(self, ours: Span, theirs: Span) -> bool:
        """
        Whether two spans overlap once expressed in the same sentence coordinates.

        Both spans are first rebased onto the sentences `theirs` actually starts
        and ends in.
        """
        lengths = [len(sentence) for sentence in self.sentences]
        count = len(lengths)

        sentence = theirs.sentence
        their_start, their_end = theirs.start_token, theirs.end_token
        while sentence < count and their_start >= lengths[sentence]:
            their_start -= lengths[sentence]
            their_end -= lengths[sentence]
            sentence += 1
        their_start_sentence = sentence
        their_end_sentence = sentence
        while their_end_sentence < count and their_end > lengths[their_end_sentence]:
            their_end -= lengths[their_end_sentence]
            their_end_sentence += 1

        our_start, our_end = ours.start_token, ours.end_token
        our_start_sentence = our_end_sentence = ours.sentence
        while our_start_sentence < their_start_sentence:
            our_start -= lengths[our_start_sentence]
            our_start_sentence += 1
        while our_start_sentence > their_start_sentence:
            our_start_sentence -= 1
            our_start += lengths[our_start_sentence]
        while our_end_sentence < their_end_sentence:
            our_end -= lengths[our_end_sentence]
            our_end_sentence += 1
        while our_end_sentence > their_end_sentence:
            our_end_sentence -= 1
            our_end += lengths[our_end_sentence]

        return (our_start <= their_start < our_end) or (their_start <= our_start < their_end)
