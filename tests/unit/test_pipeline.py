"""
Unit tests for cache-aware network generation.
"""

import pytest

from comention_graph.corpus import load_corpus
from comention_graph.exceptions import ComentionGraphError
from comention_graph.pipeline import generate_network, load_or_build, needs_refresh


def _no_corpus():
    raise AssertionError("corpus should not be loaded when the cache is reused")


class TestNeedsRefresh:
    """Tests for needs_refresh()."""

    def test_missing_paths_force_refresh(self, tmp_path):
        assert needs_refresh(False, None, tmp_path / "aliases.xml")
        assert needs_refresh(False, tmp_path / "comentions.xml", None)

    def test_missing_files_force_refresh(self, tmp_path):
        comentions = tmp_path / "comentions.xml"
        comentions.write_text("<corpus/>")
        assert needs_refresh(False, comentions, tmp_path / "aliases.xml")

    def test_existing_files_reused_unless_forced(self, tmp_path):
        comentions = tmp_path / "comentions.xml"
        aliases = tmp_path / "aliases.xml"
        comentions.write_text("<corpus/>")
        aliases.write_text("<aliases/>")

        assert not needs_refresh(False, comentions, aliases)
        assert needs_refresh(True, comentions, aliases)


class TestLoadOrBuild:
    """Tests for load_or_build()."""

    def test_builds_then_reuses_cache(self, tmp_path, corpus_file):
        comentions = tmp_path / "comentions.xml"
        aliases = tmp_path / "aliases.xml"

        built = load_or_build(lambda: load_corpus(corpus_file), comentions, aliases)
        assert not built.from_cache
        assert comentions.exists() and aliases.exists()

        cached = load_or_build(_no_corpus, comentions, aliases)
        assert cached.from_cache
        assert list(cached.documents) == list(built.documents)
        assert [e.key for e in cached.registry] == [e.key for e in built.registry]

    def test_force_refresh_rebuilds(self, tmp_path, corpus_file):
        comentions = tmp_path / "comentions.xml"
        aliases = tmp_path / "aliases.xml"
        comentions.write_text("not xml")
        aliases.write_text("not xml")

        data = load_or_build(
            lambda: load_corpus(corpus_file), comentions, aliases, force_refresh=True
        )

        assert not data.from_cache
        assert comentions.read_text().startswith("<?xml")

    def test_streams_to_stdout_without_paths(self, capsys, sample_documents):
        data = load_or_build(lambda: sample_documents)

        out = capsys.readouterr().out
        assert "<corpus>" in out
        assert "<aliases>" in out
        assert len(data.documents) == 2

    def test_rebuild_without_corpus_raises(self, tmp_path):
        with pytest.raises(ComentionGraphError):
            load_or_build(None, tmp_path / "comentions.xml", tmp_path / "aliases.xml")


class TestGenerateNetwork:
    """Tests for generate_network()."""

    def test_cached_and_fresh_networks_match(self, tmp_path, corpus_file):
        comentions = tmp_path / "comentions.xml"
        aliases = tmp_path / "aliases.xml"

        fresh = generate_network(lambda: load_corpus(corpus_file), comentions, aliases)
        cached = generate_network(_no_corpus, comentions, aliases)

        def summary(edges):
            return [(e.a.key, e.b.key, e.weight, e.sentences, e.documents) for e in edges]

        assert summary(fresh) == summary(cached)
        assert summary(fresh)[-1][:2] == ("Apple Computer", "IBM Corp.")
