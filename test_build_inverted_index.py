"""Tests for the single-pass index builder and the read-only CorpusIndex."""

import logging

import pytest

from WikiRetriever.build_inverted_index import CorpusIndex, InvertedIndexBuilder, build_index
from WikiRetriever.errors import IndexAlreadyBuiltError
from WikiRetriever.preprocessing.document import Document


def assert_structures_agree(index: CorpusIndex):
    """Posting membership, term frequency and occurrence counts describe the same facts."""
    for term, doc_ids in index.inverted_index.items():
        for doc_id in doc_ids:
            assert index.term_frequency[doc_id][term] > 0
            assert index.term_frequency[doc_id][term] == index.occurrence_matrix[term][doc_id]

    for doc_id, counts in index.term_frequency.items():
        for term, count in counts.items():
            assert count > 0
            assert doc_id in index.inverted_index[term]
            assert index.occurrence_matrix[term][doc_id] == count

    for term, doc_counts in index.occurrence_matrix.items():
        assert set(doc_counts) == set(index.inverted_index[term])


@pytest.mark.unit
class TestInvertedIndexBuilder:
    def test_builds_all_three_structures(self, pets_index):
        assert dict(pets_index.inverted_index) == {
            "cat": frozenset({1}),
            "dog": frozenset({1, 2}),
            "bird": frozenset({2}),
        }
        assert dict(pets_index.term_frequency[1]) == {"cat": 2, "dog": 1}
        assert dict(pets_index.term_frequency[2]) == {"dog": 1, "bird": 1}
        assert dict(pets_index.occurrence_matrix["cat"]) == {1: 2}
        assert dict(pets_index.occurrence_matrix["dog"]) == {1: 1, 2: 1}

    def test_structures_agree(self, topics_corpus):
        assert_structures_agree(build_index(topics_corpus))

    def test_only_supplied_ids_appear(self, topics_corpus):
        index = build_index(topics_corpus)
        supplied = {doc["id"] for doc in topics_corpus}
        assert set(index.term_frequency) == supplied
        for doc_ids in index.inverted_index.values():
            assert doc_ids <= supplied
        for doc_counts in index.occurrence_matrix.values():
            assert set(doc_counts) <= supplied

    def test_accepts_document_objects(self):
        index = build_index([Document(id=7, content="Hello hello"), Document(id=3, content="world")])
        assert index.document_ids == (7, 3)
        assert index.count("hello", 7) == 2
        assert index.postings("world") == frozenset({3})

    def test_mapping_without_id_gets_position(self):
        index = build_index([{"content": "alpha"}, {"content": "beta"}])
        assert index.document_ids == (1, 2)

    def test_empty_document_has_empty_entry(self):
        index = build_index([{"id": 1, "content": ""}, {"id": 2, "content": "!!!"}])
        assert index.document_count == 2
        assert dict(index.term_frequency[1]) == {}
        assert dict(index.term_frequency[2]) == {}
        assert len(index.inverted_index) == 0

    def test_empty_corpus(self):
        index = build_index([])
        assert index.document_count == 0
        assert len(index) == 0
        assert index.postings("anything") == frozenset()
        assert dict(index.term_counts(1)) == {}

    def test_duplicate_ids_merge(self, caplog):
        with caplog.at_level(logging.WARNING):
            index = build_index([
                {"id": 1, "content": "cat"},
                {"id": 1, "content": "cat dog"},
            ])

        assert index.document_ids == (1,)
        assert index.document_count == 2
        assert dict(index.term_frequency[1]) == {"cat": 2, "dog": 1}
        assert index.postings("cat") == frozenset({1})
        assert index.occurrence_matrix["cat"][1] == 2
        assert "Duplicate document id 1" in caplog.text

    def test_builder_is_single_use(self, pets_corpus):
        builder = InvertedIndexBuilder()
        builder.build(pets_corpus)
        with pytest.raises(IndexAlreadyBuiltError):
            builder.build(pets_corpus)

    def test_occurrence_matrix_keeps_first_seen_term_order(self):
        index = build_index([{"id": 1, "content": "zebra apple"}, {"id": 2, "content": "mango zebra"}])
        assert list(index.occurrence_matrix) == ["zebra", "apple", "mango"]


@pytest.mark.unit
class TestCorpusIndexIsReadOnly:
    def test_top_level_mappings_reject_writes(self, pets_index):
        with pytest.raises(TypeError):
            pets_index.inverted_index["fish"] = frozenset({1})
        with pytest.raises(TypeError):
            pets_index.term_frequency[3] = {}
        with pytest.raises(TypeError):
            pets_index.occurrence_matrix["fish"] = {}

    def test_nested_mappings_reject_writes(self, pets_index):
        with pytest.raises(TypeError):
            pets_index.term_frequency[1]["cat"] = 10
        with pytest.raises(TypeError):
            pets_index.occurrence_matrix["cat"][1] = 10

    def test_posting_sets_are_frozen(self, pets_index):
        with pytest.raises(AttributeError):
            pets_index.inverted_index["dog"].add(3)

    def test_builder_changes_after_build_do_not_leak(self, pets_corpus):
        builder = InvertedIndexBuilder()
        index = builder.build(pets_corpus)
        builder.index["cat"].add(99)
        builder.term_frequency[1]["cat"] = 99
        assert index.postings("cat") == frozenset({1})
        assert index.count("cat", 1) == 2

    def test_lookup_helpers(self, pets_index):
        assert pets_index.document_frequency("dog") == 2
        assert pets_index.document_frequency("fish") == 0
        assert pets_index.count("cat", 2) == 0
        assert pets_index.count("cat", 42) == 0
