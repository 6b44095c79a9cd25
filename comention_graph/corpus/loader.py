"""
Load parsed documents from JSON files.

Two layouts are accepted:
- ``.jsonl``: one document object per line (blank lines ignored)
- ``.json``: a list of document objects, or an object with a "documents" list
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from comention_graph.corpus.models import ParsedDocument
from comention_graph.exceptions import CorpusFormatError

logger = logging.getLogger(__name__)


def parse_documents(records: Iterable[Any], source: str = "<records>") -> list[ParsedDocument]:
    """
    Validate raw document records.

    Args:
        records: Decoded JSON objects, one per document
        source: Label used in error messages

    Returns:
        Documents in input order

    Raises:
        CorpusFormatError: If a record is malformed or a document name repeats
    """
    documents: list[ParsedDocument] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        try:
            document = ParsedDocument.model_validate(record)
        except ValidationError as e:
            raise CorpusFormatError(f"{source}: invalid document #{index}: {e}") from e
        if document.name in seen:
            raise CorpusFormatError(f"{source}: duplicate document name {document.name!r}")
        seen.add(document.name)
        documents.append(document)
    return documents


def _read_jsonl(path: Path) -> list[Any]:
    records = []
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise CorpusFormatError(f"{path}:{line_number}: invalid JSON: {e}") from e
    return records


def _read_json(path: Path) -> list[Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CorpusFormatError(f"{path}: invalid JSON: {e}") from e
    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise CorpusFormatError(f"{path}: expected a list of documents")
    return data


def load_corpus(path: Path | str) -> list[ParsedDocument]:
    """
    Load a parsed corpus from disk.

    Args:
        path: A .json or .jsonl file

    Returns:
        Documents in file order

    Raises:
        CorpusFormatError: If the file cannot be decoded or validated
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        if path.suffix.lower() == ".jsonl":
            records = _read_jsonl(path)
        else:
            records = _read_json(path)
    except UnicodeDecodeError as e:
        raise CorpusFormatError(f"{path}: not valid UTF-8: {e}") from e
    documents = parse_documents(records, source=str(path))
    logger.info(f"Loaded {len(documents)} documents from {path}")
    return documents
