"""
Abstract index / search engine interface and the shared result type.
"""
from typing import Iterable, List, NamedTuple

from .preprocessing.document import Document, DocumentLike


class SearchResult(NamedTuple):
    """One hit: the document ID and its score (always 1.0 for boolean search)."""
    document_id: int
    score: float


class Index:
    def __init__(self):
        pass

    def index_documents(self, documents: Iterable[DocumentLike]) -> None:
        raise NotImplementedError()

    def get_document(self, doc_id: int) -> Document:
        raise NotImplementedError()


class SearchEngine:
    def __init__(self, index: Index):
        self.index = index

    def search(self, query: str, top_k: int = 10) -> List[SearchResult]:
        raise NotImplementedError()

    def boolean_search(self, query: str) -> List[SearchResult]:
        raise NotImplementedError()
