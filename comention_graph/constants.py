"""
Constants for comention_graph package.

Centralizes magic numbers and configuration defaults.
"""

# Corpus cache XML vocabulary
CORPUS_TAG = "corpus"
DOCUMENT_TAG = "document"
SENTENCE_TAG = "sentence"
ENTITY_TAG = "entity"
ALIASES_TAG = "aliases"
ALIAS_TAG = "alias"

# Network output XML vocabulary
GRAPH_TAG = "graph"
EDGE_TAG = "edge"
NODE_TAG = "node"

# A sentence is "interesting" once it mentions this many distinct entities
MIN_ENTITIES_PER_SENTENCE = 2

# Edge filter defaults (0 / None keeps every scored pair)
DEFAULT_MIN_EDGE_SENTENCES = 0
DEFAULT_MIN_EDGE_WEIGHT = None

