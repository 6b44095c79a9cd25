"""
Unit tests for co-mention indexing and coreference injection.
"""

from comention_graph.entity_resolution import EntityRegistry
from comention_graph.indexing import CoMentionIndexer, collect_mentions


class TestCollectMentions:
    """Tests for explicit and coreference-derived mentions."""

    def test_pronoun_repeats_antecedent_entity(self, sample_documents):
        collected = collect_mentions(sample_documents[0])

        assert [(m.sentence, m.text) for m in collected.mentions] == [
            (0, "IBM"),
            (0, "Apple"),
            (1, "Microsoft"),
            (1, "Apple"),
        ]
        assert collected.skipped_coreferences == 0

    def test_mismatched_pronoun_skipped(self, make_document):
        doc = make_document(
            "doc",
            ["IBM sued Apple .", "Microsoft backed it ."],
            entities=[(0, 0, 1), (0, 2, 3), (1, 0, 1)],
            coreferences=[([(0, 2, 3, "Apple")], [(1, 2, 3, "they")])],
        )

        collected = collect_mentions(doc)

        assert [m.text for m in collected.mentions] == ["IBM", "Apple", "Microsoft"]
        assert collected.skipped_coreferences == 1

    def test_mismatched_antecedent_skipped(self, make_document):
        doc = make_document(
            "doc",
            ["IBM sued Apple .", "Microsoft backed it ."],
            entities=[(0, 0, 1), (0, 2, 3), (1, 0, 1)],
            coreferences=[([(0, 2, 3, "Apple Computer")], [(1, 2, 3, "it")])],
        )

        collected = collect_mentions(doc)

        assert len(collected.mentions) == 3
        assert collected.skipped_coreferences == 1

    def test_chained_coreference(self, make_document):
        """Test that a later entry can use a pronoun resolved by an earlier one."""
        doc = make_document(
            "doc",
            ["Apple rose .", "It gained .", "IBM said the company led ."],
            entities=[(0, 0, 1), (2, 0, 1)],
            coreferences=[
                ([(0, 0, 1, "Apple")], [(1, 0, 1, "It")]),
                ([(1, 0, 1, "It")], [(2, 2, 4, "the company")]),
            ],
        )

        collected = collect_mentions(doc)

        assert [(m.sentence, m.text) for m in collected.mentions] == [
            (0, "Apple"),
            (2, "IBM"),
            (1, "Apple"),
            (2, "Apple"),
        ]

    def test_out_of_range_span_skipped(self, make_document):
        doc = make_document("doc", ["Apple rose ."], entities=[(0, 0, 1), (3, 0, 1)])

        collected = collect_mentions(doc)

        assert [m.text for m in collected.mentions] == ["Apple"]
        assert collected.skipped_spans == 1


class TestCoMentionIndexer:
    """Tests for CoMentionIndexer."""

    def test_index_corpus(self, sample_documents):
        index = CoMentionIndexer(EntityRegistry()).index_corpus(sample_documents)
        registry = index.registry

        assert [entity.key for entity in registry] == ["IBM Corp.", "Apple Computer", "Microsoft"]
        assert list(index.documents) == ["wsj_0001", "wsj_0002"]

        doc1 = index.documents["wsj_0001"]
        assert doc1.total_sentences == 2
        assert doc1.interesting_sentences == ((0, 1), (2, 1))

        doc2 = index.documents["wsj_0002"]
        assert doc2.interesting_sentences == ((1, 0),)

    def test_index_stats(self, sample_documents):
        index = CoMentionIndexer().index_corpus(sample_documents)

        stats = index.stats
        assert stats.documents_seen == 3
        assert stats.documents_kept == 2
        assert stats.documents_dropped == 1
        assert stats.mentions == 9
        assert stats.entities_minted == 3
        assert stats.cache_hits == 4

    def test_single_entity_sentences_are_not_interesting(self, make_document):
        """Test that coreference across sentences does not pair distant entities."""
        doc = make_document(
            "doc",
            ["Apple rose .", "IBM fell and it was blamed ."],
            entities=[(0, 0, 1), (1, 0, 1)],
            coreferences=[([(1, 0, 1, "IBM")], [(1, 3, 4, "it")])],
        )

        assert CoMentionIndexer().index_document(doc) is None

    def test_repeated_entity_counted_once_per_sentence(self, make_document):
        doc = make_document(
            "doc",
            ["Apple and Apple and IBM ."],
            entities=[(0, 0, 1), (0, 2, 3), (0, 4, 5)],
        )

        comentions = CoMentionIndexer().index_document(doc)

        assert comentions.interesting_sentences == ((0, 1),)

    def test_registry_shared_across_documents(self, make_document):
        registry = EntityRegistry()
        indexer = CoMentionIndexer(registry)
        indexer.index_document(make_document("a", ["TRW and IBM ."], entities=[(0, 0, 1), (0, 2, 3)]))
        comentions = indexer.index_document(
            make_document("b", ["TRW Inc. and Apple ."], entities=[(0, 0, 2), (0, 3, 4)])
        )

        assert comentions.interesting_sentences == ((0, 2),)
        assert registry.key(0) == "TRW Inc."
