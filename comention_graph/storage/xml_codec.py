"""
XML cache codec for co-mention indexes, alias registries and scored networks.

Formats:
    <corpus>
      <document name="..." sentences="N">
        <sentence><entity>key</entity>...</sentence>
      </document>
    </corpus>

    <aliases>
      <entity key="..."><alias>...</alias>...</entity>
    </aliases>

    <graph>
      <edge weight="0.5" sentences="2" documents="1"><node>a</node><node>b</node></edge>
    </graph>

Readers are strict: anything other than exactly these structures raises
CacheFormatError. Parsing goes through defusedxml.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import IO

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError
from defusedxml.ElementTree import parse as safe_parse

from comention_graph.constants import (
    ALIAS_TAG,
    ALIASES_TAG,
    CORPUS_TAG,
    DOCUMENT_TAG,
    EDGE_TAG,
    ENTITY_TAG,
    GRAPH_TAG,
    NODE_TAG,
    SENTENCE_TAG,
)
from comention_graph.entity_resolution.registry import EntityHandle, EntityRegistry
from comention_graph.exceptions import CacheFormatError
from comention_graph.indexing.indexer import DocumentComentions
from comention_graph.network.scoring import EntityPair

logger = logging.getLogger(__name__)

Target = Path | str | IO[str] | None

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


# --- Writing ---


def _leaf(parent: ET.Element, tag: str, text: str) -> None:
    ET.SubElement(parent, tag).text = text


def _write_tree(root: ET.Element, target: Target) -> None:
    """
    Write an indented document to a path (atomically), a text stream, or stdout.
    """
    ET.indent(root)
    tree = ET.ElementTree(root)

    if target is None or hasattr(target, "write"):
        stream = sys.stdout if target is None else target
        stream.write(XML_DECLARATION)
        tree.write(stream, encoding="unicode")
        stream.write("\n")
        stream.flush()
        return

    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            tree.write(f, encoding="utf-8", xml_declaration=True)
            f.write(b"\n")
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {path}")


def write_comentions(
    documents: Mapping[str, DocumentComentions], registry: EntityRegistry, target: Target = None
) -> None:
    """Serialize a co-mention index, entities referenced by canonical key."""
    root = ET.Element(CORPUS_TAG)
    for name, document in documents.items():
        doc_element = ET.SubElement(
            root,
            DOCUMENT_TAG,
            {"name": name, "sentences": str(document.total_sentences)},
        )
        for sentence in document.interesting_sentences:
            sentence_element = ET.SubElement(doc_element, SENTENCE_TAG)
            for handle in sentence:
                _leaf(sentence_element, ENTITY_TAG, registry.key(handle))
    _write_tree(root, target)


def write_aliases(registry: EntityRegistry, target: Target = None) -> None:
    """Serialize every entity with its aliases, in discovery order."""
    root = ET.Element(ALIASES_TAG)
    for entity in registry:
        entity_element = ET.SubElement(root, ENTITY_TAG, {"key": entity.key})
        for alias in entity.aliases:
            _leaf(entity_element, ALIAS_TAG, alias)
    _write_tree(root, target)


def write_network(pairs: Iterable[EntityPair], target: Target = None) -> None:
    """Serialize scored edges in the given order."""
    root = ET.Element(GRAPH_TAG)
    for pair in pairs:
        edge = ET.SubElement(
            root,
            EDGE_TAG,
            {
                "weight": repr(pair.weight),
                "sentences": str(pair.sentences),
                "documents": str(pair.documents),
            },
        )
        _leaf(edge, NODE_TAG, pair.a.key)
        _leaf(edge, NODE_TAG, pair.b.key)
    _write_tree(root, target)


# --- Reading ---


def _parse(source: Path | str | IO[str], root_tag: str) -> ET.Element:
    try:
        root = safe_parse(source).getroot()
    except (ParseError, DefusedXmlException) as e:
        raise CacheFormatError(f"Unrecognized format: {e}") from e
    _expect(root, root_tag)
    return root


def _blank(text: str | None) -> bool:
    return text is None or not text.strip()


def _expect(element: ET.Element, tag: str) -> None:
    if element.tag != tag:
        raise CacheFormatError(f"Unrecognized format: expected <{tag}>, found <{element.tag}>")


def _children(element: ET.Element, tag: str) -> list[ET.Element]:
    """Children of a container element, which may hold nothing but whitespace."""
    if not _blank(element.text):
        raise CacheFormatError(f"Unrecognized format: text inside <{element.tag}>")
    children = list(element)
    for child in children:
        _expect(child, tag)
        if not _blank(child.tail):
            raise CacheFormatError(f"Unrecognized format: text after <{child.tag}>")
    return children


def _text(element: ET.Element) -> str:
    if len(element):
        raise CacheFormatError(f"Unrecognized format: <{element.tag}> must not have children")
    return element.text or ""


def _attribute(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise CacheFormatError(f"Unrecognized format: <{element.tag}> lacks {name!r}")
    return value


def read_aliases(source: Path | str | IO[str]) -> EntityRegistry:
    """
    Rebuild an entity registry from an aliases document.

    Raises:
        CacheFormatError: On any structural deviation or a repeated key
    """
    root = _parse(source, ALIASES_TAG)
    entries: list[tuple[str, list[str]]] = []
    seen: set[str] = set()
    for entity_element in _children(root, ENTITY_TAG):
        key = _attribute(entity_element, "key")
        if key in seen:
            raise CacheFormatError(f"Unrecognized format: duplicate entity key {key!r}")
        seen.add(key)
        aliases = [_text(alias) for alias in _children(entity_element, ALIAS_TAG)]
        entries.append((key, aliases))

    registry = EntityRegistry.from_aliases(entries)
    logger.info(f"Loaded {len(registry)} entities")
    return registry


def read_comentions(
    source: Path | str | IO[str], registry: EntityRegistry
) -> dict[str, DocumentComentions]:
    """
    Rebuild a co-mention index against a registry loaded with read_aliases().

    Raises:
        CacheFormatError: On any structural deviation, a repeated document
            name, or an entity key missing from the registry
    """
    root = _parse(source, CORPUS_TAG)
    keys = registry.by_key()

    documents: dict[str, DocumentComentions] = {}
    for doc_element in _children(root, DOCUMENT_TAG):
        name = _attribute(doc_element, "name")
        if name in documents:
            raise CacheFormatError(f"Unrecognized format: duplicate document {name!r}")
        try:
            total_sentences = int(_attribute(doc_element, "sentences"))
        except ValueError as e:
            raise CacheFormatError(f"Unrecognized format: bad sentence count in {name!r}") from e

        sentences = []
        for sentence_element in _children(doc_element, SENTENCE_TAG):
            handles: dict[EntityHandle, None] = {}
            for entity_element in _children(sentence_element, ENTITY_TAG):
                key = _text(entity_element)
                handle = keys.get(key)
                if handle is None:
                    raise CacheFormatError(f"Missing aliases for {key!r}")
                handles[handle] = None
            sentences.append(tuple(handles))

        documents[name] = DocumentComentions(
            total_sentences=total_sentences,
            interesting_sentences=tuple(sentences),
        )

    logger.info(f"Loaded co-mentions for {len(documents)} documents")
    return documents
