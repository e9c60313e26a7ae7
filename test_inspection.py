"""Tests for the textual dumps of the index structures."""

import pytest

from WikiRetriever.build_inverted_index import build_index
from WikiRetriever.inspection import dump_inverted_index, dump_occurrence_matrix


@pytest.mark.unit
class TestInspection:
    def test_inverted_index_dump(self, pets_index):
        assert dump_inverted_index(pets_index).splitlines() == [
            "Inverted Index:",
            "--------------",
            "bird: [2]",
            "cat: [1]",
            "dog: [1, 2]",
        ]

    def test_inverted_index_ids_ascending(self):
        index = build_index([{"id": doc_id, "content": "x"} for doc_id in (10, 2, 33)])
        assert dump_inverted_index(index).splitlines()[-1] == "x: [2, 10, 33]"

    def test_occurrence_matrix_dump(self, pets_index):
        header = "Term\t| Doc 1\t| Doc 2"
        assert dump_occurrence_matrix(pets_index).splitlines() == [
            header,
            "-" * len(header),
            "cat\t| 2\t| 0",
            "dog\t| 1\t| 1",
            "bird\t| 0\t| 1",
        ]

    def test_occurrence_matrix_columns_ascending(self):
        index = build_index([{"id": 3, "content": "b"}, {"id": 1, "content": "a"}])
        lines = dump_occurrence_matrix(index).splitlines()
        assert lines[0] == "Term\t| Doc 1\t| Doc 3"
        assert lines[2:] == ["b\t| 0\t| 1", "a\t| 1\t| 0"]

    def test_empty_corpus(self):
        index = build_index([])
        assert dump_inverted_index(index).splitlines() == ["Inverted Index:", "--------------"]
        assert dump_occurrence_matrix(index).splitlines() == ["Term", "----"]

    def test_dumps_are_deterministic(self, topics_system):
        assert topics_system.dump_inverted_index() == topics_system.dump_inverted_index()
        assert topics_system.dump_occurrence_matrix() == topics_system.dump_occurrence_matrix()
