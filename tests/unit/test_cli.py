"""
Unit tests for the comention-network command.
"""

from comention_graph.cli.commands import build_parser, run_build_network
from comention_graph.config import get_settings


class TestBuildParser:
    """Tests for argument parsing."""

    def test_positional_cache_paths(self):
        args = build_parser(get_settings()).parse_args(
            ["--force-refresh", "comentions.xml", "aliases.xml"]
        )

        assert args.force_refresh
        assert str(args.comentions) == "comentions.xml"
        assert str(args.aliases) == "aliases.xml"
        assert args.min_sentences == 0
        assert args.min_weight is None

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("COMENTION_MIN_EDGE_SENTENCES", "2")
        get_settings.cache_clear()

        args = build_parser(get_settings()).parse_args([])

        assert args.min_sentences == 2
        assert args.comentions is None


class TestRunBuildNetwork:
    """Tests for run_build_network()."""

    def test_writes_network(self, tmp_path, corpus_file):
        output = tmp_path / "network.xml"

        status = run_build_network(
            [
                str(tmp_path / "comentions.xml"),
                str(tmp_path / "aliases.xml"),
                "--corpus",
                str(corpus_file),
                "--output",
                str(output),
            ]
        )

        assert status == 0
        text = output.read_text()
        assert text.count("<edge ") == 2
        assert "<node>IBM Corp.</node>" in text

    def test_min_sentences_filters_edges(self, tmp_path, corpus_file):
        output = tmp_path / "network.xml"

        status = run_build_network(
            [
                str(tmp_path / "comentions.xml"),
                str(tmp_path / "aliases.xml"),
                "--corpus",
                str(corpus_file),
                "--output",
                str(output),
                "--min-sentences",
                "2",
            ]
        )

        assert status == 0
        assert output.read_text().count("<edge ") == 1

    def test_missing_corpus_fails(self, tmp_path):
        status = run_build_network(
            [str(tmp_path / "comentions.xml"), str(tmp_path / "aliases.xml")]
        )

        assert status == 1

    def test_malformed_cache_fails(self, tmp_path):
        comentions = tmp_path / "comentions.xml"
        aliases = tmp_path / "aliases.xml"
        comentions.write_text("<corpus/>")
        aliases.write_text("<graph/>")

        assert run_build_network([str(comentions), str(aliases)]) == 1

    def test_undecodable_corpus_fails(self, tmp_path):
        corpus = tmp_path / "corpus.jsonl"
        corpus.write_bytes(b'{"name": "caf\xe9"}\n')

        status = run_build_network(
            [
                str(tmp_path / "comentions.xml"),
                str(tmp_path / "aliases.xml"),
                "--corpus",
                str(corpus),
            ]
        )

        assert status == 1

    def test_invalid_settings_fail(self, monkeypatch):
        monkeypatch.setenv("COMENTION_MIN_EDGE_SENTENCES", "-1")

        assert run_build_network([]) == 1
