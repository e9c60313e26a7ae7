"""Shared fixtures: small corpora and systems built from them."""

import pytest

from WikiRetriever.build_inverted_index import build_index
from WikiRetriever.search_system import InformationRetrievalSystem


@pytest.fixture
def pets_corpus():
    """Two-document corpus used by the boolean and ranking scenarios."""
    return [
        {"id": 1, "content": "cat dog cat"},
        {"id": 2, "content": "dog bird"},
    ]


@pytest.fixture
def pets_index(pets_corpus):
    return build_index(pets_corpus)


@pytest.fixture
def pets_system(pets_corpus):
    return InformationRetrievalSystem(pets_corpus)


@pytest.fixture
def topics_corpus():
    """A handful of short topic blurbs with overlapping vocabulary."""
    return [
        {"id": 1, "title": "Information retrieval",
         "content": "Information retrieval is finding documents. Retrieval systems rank documents."},
        {"id": 2, "title": "Machine learning",
         "content": "Machine learning studies algorithms that learn from data."},
        {"id": 3, "title": "Natural language processing",
         "content": "Language processing combines machine learning and linguistics."},
        {"id": 4, "title": "Data mining",
         "content": "Data mining discovers patterns in data using machine learning."},
        {"id": 5, "title": "Search engine",
         "content": "A search engine is an information retrieval system for the web."},
    ]


@pytest.fixture
def topics_system(topics_corpus):
    return InformationRetrievalSystem(topics_corpus)
