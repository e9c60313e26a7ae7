import logging
import time
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from WikiRetriever.errors import IndexAlreadyBuiltError
from WikiRetriever.preprocessing.document import DocumentLike, as_document
from WikiRetriever.preprocessing.tokenizer import tokenize

logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: FrozenSet[int] = frozenset()
_EMPTY_COUNTS: Mapping = MappingProxyType({})


class CorpusIndex:
    """
    Read-only index over a fixed corpus.

    Holds three structures built in a single pass:
        inverted_index:    term -> frozenset of document IDs
        term_frequency:    document ID -> {term: count}
        occurrence_matrix: term -> {document ID: count}

    The occurrence matrix is the term frequency table transposed and is kept
    separately for reporting. Instances are produced by InvertedIndexBuilder
    and never change afterwards.
    """

    def __init__(self, inverted_index, term_frequency, occurrence_matrix, document_ids, document_count):
        self._inverted_index = MappingProxyType(
            {term: frozenset(doc_ids) for term, doc_ids in inverted_index.items()}
        )
        self._term_frequency = MappingProxyType(
            {doc_id: MappingProxyType(dict(counts)) for doc_id, counts in term_frequency.items()}
        )
        self._occurrence_matrix = MappingProxyType(
            {term: MappingProxyType(dict(counts)) for term, counts in occurrence_matrix.items()}
        )
        self._document_ids = tuple(document_ids)
        self._document_count = document_count

    @property
    def inverted_index(self) -> Mapping[str, FrozenSet[int]]:
        return self._inverted_index

    @property
    def term_frequency(self) -> Mapping[int, Mapping[str, int]]:
        return self._term_frequency

    @property
    def occurrence_matrix(self) -> Mapping[str, Mapping[int, int]]:
        return self._occurrence_matrix

    @property
    def document_ids(self) -> Tuple[int, ...]:
        """Distinct document IDs in the order they were first supplied."""
        return self._document_ids

    @property
    def document_count(self) -> int:
        """Number of documents supplied at construction (N in idf)."""
        return self._document_count

    def postings(self, term: str) -> FrozenSet[int]:
        """Posting set for a term, empty if the term was never indexed."""
        return self._inverted_index.get(term, _EMPTY_POSTINGS)

    def document_frequency(self, term: str) -> int:
        return len(self.postings(term))

    def term_counts(self, doc_id: int) -> Mapping[str, int]:
        """Term counts of one document, empty for unknown IDs."""
        return self._term_frequency.get(doc_id, _EMPTY_COUNTS)

    def count(self, term: str, doc_id: int) -> int:
        return self.term_counts(doc_id).get(term, 0)

    def __len__(self):
        return len(self._document_ids)

    def __repr__(self):
        return (f"CorpusIndex(documents={self._document_count}, "
                f"terms={len(self._inverted_index)})")


class InvertedIndexBuilder:
    """
    Builds a CorpusIndex from an ordered corpus in one pass.

    A builder is single use: the structures are created empty, filled by
    ``build`` and then frozen into the returned index.
    """

    def __init__(self):
        self.index: Dict[str, set] = defaultdict(set)
        self.term_frequency: Dict[int, Dict[str, int]] = {}
        self.occurrence_matrix: Dict[str, Dict[int, int]] = {}
        self.document_ids = []
        self.document_count = 0
        self._built: Optional[CorpusIndex] = None

    def build(self, documents: Iterable[DocumentLike]) -> CorpusIndex:
        """
        Index every document in input order.

        Args:
            documents: Document objects or {"id", "content"} mappings

        Returns:
            The frozen CorpusIndex
        """
        if self._built is not None:
            raise IndexAlreadyBuiltError("This builder has already built an index; create a new one")

        start_time = time.time()
        for position, item in enumerate(documents):
            document = as_document(item, position)
            self._index_document(document.id, document.content)

        self._built = CorpusIndex(
            self.index,
            self.term_frequency,
            self.occurrence_matrix,
            self.document_ids,
            self.document_count,
        )
        logger.info(
            "Indexed %d documents (%d terms) in %.4f seconds",
            self.document_count, len(self.index), time.time() - start_time,
        )
        return self._built

    def _index_document(self, doc_id: int, text: str):
        """
        Index a single document.

        Args:
            doc_id: Document ID
            text: Document content
        """
        self.document_count += 1

        if doc_id in self.term_frequency:
            # Same ID twice: statistics merge into the existing entry
            logger.warning("Duplicate document id %s; merging its terms into the earlier document", doc_id)
        else:
            self.term_frequency[doc_id] = {}
            self.document_ids.append(doc_id)

        doc_counts = self.term_frequency[doc_id]
        for term in tokenize(text):
            doc_counts[term] = doc_counts.get(term, 0) + 1
            self.index[term].add(doc_id)
            term_docs = self.occurrence_matrix.setdefault(term, {})
            term_docs[doc_id] = term_docs.get(doc_id, 0) + 1


def build_index(documents: Iterable[DocumentLike]) -> CorpusIndex:
    """Build a CorpusIndex with a fresh builder."""
    return InvertedIndexBuilder().build(documents)
