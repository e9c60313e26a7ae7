"""Tests for the demo entry point, using a JSON corpus instead of crawling."""

import json

import pytest

from WikiRetriever import main as main_module


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text(json.dumps([
        {"id": 1, "title": "Pets", "content": "cat dog cat"},
        {"id": 2, "title": "Birds", "content": "dog bird"},
    ]), encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda *args, **kwargs: None)


@pytest.mark.unit
class TestMain:
    def test_explicit_queries(self, corpus_file, capsys):
        code = main_module.main([
            "--documents", corpus_file,
            "--boolean-query", "dog NOT cat",
            "--tfidf-query", "cat",
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert 'Search for "dog NOT cat"' in out
        assert "1. [2] Birds" in out
        assert "1. [1] Pets" in out
        assert "Similarity: 1.0000" in out

    def test_demo_queries_and_dumps(self, corpus_file, capsys):
        code = main_module.main(["--documents", corpus_file, "--dump-index", "--dump-matrix"])
        out = capsys.readouterr().out

        assert code == 0
        assert 'Search for "information AND retrieval"' in out
        assert "No results found for Boolean search." in out
        assert "Inverted Index:" in out
        assert "cat\t| 2\t| 0" in out

    def test_crawls_when_no_documents_given(self, monkeypatch, capsys):
        seen = {}

        async def fake_get_wikipedia_data(topics, config=None):
            seen["topics"] = topics
            return [{"id": 1, "content": "search engine"}, {"id": 2, "content": "data"}]

        monkeypatch.setattr(main_module, "get_wikipedia_data", fake_get_wikipedia_data)
        code = main_module.main(["--topics", "Search_engine", "Data", "--tfidf-query", "engine"])

        assert code == 0
        assert seen["topics"] == ["Search_engine", "Data"]
        assert "1. [1] Document 1" in capsys.readouterr().out

    def test_missing_corpus_file(self, tmp_path):
        assert main_module.main(["--documents", str(tmp_path / "nope.json")]) == 1

    def test_bad_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("not json", encoding="utf-8")
        assert main_module.main(["--config", str(path), "--documents", "unused.json"]) == 1

    def test_corpus_of_non_objects(self, tmp_path):
        path = tmp_path / "docs.json"
        path.write_text(json.dumps(["cat", "dog"]), encoding="utf-8")
        assert main_module.main(["--documents", str(path)]) == 1
