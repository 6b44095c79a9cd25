"""
Pytest configuration and shared fixtures for comention_graph tests.
"""

import json

import pytest

from comention_graph.config import get_settings
from comention_graph.corpus.models import ParsedDocument


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from COMENTION_* variables and the cached Settings."""
    for name in (
        "COMENTION_CORPUS_PATH",
        "COMENTION_COMENTIONS_CACHE",
        "COMENTION_ALIASES_CACHE",
        "COMENTION_MIN_EDGE_SENTENCES",
        "COMENTION_MIN_EDGE_WEIGHT",
        "COMENTION_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _build_document(name, sentences, entities=(), coreferences=()):
    """
    Build a ParsedDocument from whitespace-separated sentences.

    Args:
        name: Document name
        sentences: Sentence strings, tokens separated by single spaces
        entities: (sentence, start_token, end_token) tuples
        coreferences: (antecedents, pronouns) pairs, each a list of
            (sentence, start_token, end_token, text) tuples
    """

    def span(entry):
        sentence, start, end = entry[:3]
        data = {"sentence": sentence, "start_token": start, "end_token": end}
        if len(entry) > 3:
            data["text"] = entry[3]
        return data

    return ParsedDocument.model_validate(
        {
            "name": name,
            "sentences": [s.split(" ") for s in sentences],
            "entities": [span(e) for e in entities],
            "coreferences": [
                {
                    "antecedents": [span(a) for a in antecedents],
                    "pronouns": [span(p) for p in pronouns],
                }
                for antecedents, pronouns in coreferences
            ],
        }
    )


@pytest.fixture
def make_document():
    """Factory for ParsedDocument instances, see _build_document()."""
    return _build_document


@pytest.fixture
def sample_documents() -> list[ParsedDocument]:
    """Small corpus: one coreferenced pronoun, one document without co-mentions."""
    return [
        _build_document(
            "wsj_0001",
            ["IBM sued Apple .", "Microsoft backed it ."],
            entities=[(0, 0, 1), (0, 2, 3), (1, 0, 1)],
            coreferences=[([(0, 2, 3, "Apple")], [(1, 2, 3, "it")])],
        ),
        _build_document(
            "wsj_0002",
            ["Apple Computer and IBM Corp. agreed .", "Only IBM commented ."],
            entities=[(0, 0, 2), (0, 3, 5), (1, 1, 2)],
        ),
        _build_document(
            "wsj_0003",
            ["Microsoft rose .", "Apple fell ."],
            entities=[(0, 0, 1), (1, 0, 1)],
        ),
    ]


@pytest.fixture
def corpus_file(tmp_path, sample_documents):
    """The sample corpus written as JSON Lines."""
    path = tmp_path / "corpus.jsonl"
    with open(path, "w", encoding="utf-8") as f:
        for doc in sample_documents:
            f.write(json.dumps(doc.model_dump()) + "\n")
    return path
