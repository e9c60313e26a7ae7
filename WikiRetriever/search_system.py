"""
Unified entry point combining boolean and TF-IDF search over one corpus,
plus adapters exposing it through the abstract Index / SearchEngine interface.
"""
import logging
from typing import Dict, Iterable, List, Optional

from .boolean_search.boolean_search import BooleanSearchEngine
from .build_inverted_index import CorpusIndex, InvertedIndexBuilder
from .inspection import dump_inverted_index, dump_occurrence_matrix
from .preprocessing.document import Document, DocumentLike, as_document
from .search_interface import Index, SearchEngine, SearchResult
from .tfidf_search.tfidf_search import TFIDFSearchEngine

logger = logging.getLogger(__name__)


class InformationRetrievalSystem:
    """
    Builds the index once from a corpus and answers boolean and ranked queries.

    There is no way to add or remove documents afterwards; a new corpus needs
    a new instance.
    """

    def __init__(self, documents: Iterable[DocumentLike] = ()):
        """
        Index the corpus.

        Args:
            documents: Ordered Document objects or {"id", "content"} mappings
        """
        self.documents: List[Document] = [as_document(item, i) for i, item in enumerate(documents)]
        self.index: CorpusIndex = InvertedIndexBuilder().build(self.documents)
        self.boolean_engine = BooleanSearchEngine(self.index)
        self.tfidf_engine = TFIDFSearchEngine(self.index)

        self._by_id: Dict[int, Document] = {}
        for document in self.documents:
            self._by_id.setdefault(document.id, document)

    def boolean_search(self, query: str) -> List[SearchResult]:
        return self.boolean_engine.search(query)

    def ranked_search(self, query: str, top_k: int = 10) -> List[SearchResult]:
        return self.tfidf_engine.search(query, top_k=top_k)

    def get_document(self, doc_id: int) -> Optional[Document]:
        """First supplied document with this ID, or None."""
        return self._by_id.get(doc_id)

    def dump_inverted_index(self) -> str:
        return dump_inverted_index(self.index)

    def dump_occurrence_matrix(self) -> str:
        return dump_occurrence_matrix(self.index)

    def print_inverted_index(self) -> None:
        print(self.dump_inverted_index())

    def print_occurrence_matrix(self) -> None:
        print(self.dump_occurrence_matrix())


class RetrieverIndex(Index):
    """
    Adapter class that implements the Index interface for WikiRetriever.
    """

    def __init__(self):
        super().__init__()
        self.system: Optional[InformationRetrievalSystem] = None

    @property
    def indexed(self) -> bool:
        return self.system is not None

    def index_documents(self, documents: Iterable[DocumentLike]) -> None:
        """
        Build the index for a corpus, replacing any previous one.

        Args:
            documents: Documents to index
        """
        self.system = InformationRetrievalSystem(documents)
        logger.info("Successfully indexed %d documents", len(self.system.documents))

    def get_document(self, doc_id: int) -> Optional[Document]:
        if self.system is None:
            return None
        return self.system.get_document(doc_id)


class RetrieverSearchEngine(SearchEngine):
    """
    Adapter class that implements the SearchEngine interface for WikiRetriever.
    """

    def __init__(self, index: RetrieverIndex):
        super().__init__(index)
        if not index.indexed:
            raise ValueError("Index must be built before initializing search engines")
        self.system = index.system

    def search(self, query: str, top_k: int = 10) -> List[SearchResult]:
        return self.system.ranked_search(query, top_k=top_k)

    def boolean_search(self, query: str) -> List[SearchResult]:
        return self.system.boolean_search(query)
