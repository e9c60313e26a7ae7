import logging
import math
from collections import Counter
from typing import Dict, List, Mapping

from WikiRetriever.build_inverted_index import CorpusIndex
from WikiRetriever.preprocessing.tokenizer import tokenize
from WikiRetriever.search_interface import SearchResult

logger = logging.getLogger(__name__)


def compute_tf(freq: int) -> float:
    """
    Log-dampened term frequency.
    TF(t,d) = 1 + log10(f(t,d)) if f(t,d) > 0, else 0
    """
    if freq <= 0:
        return 0.0
    return 1 + math.log10(freq)


def compute_idf(document_count: int, document_frequency: int) -> float:
    """
    Inverse document frequency.
    IDF(t) = log10(N/DF(t)), or 0 for terms that occur in no document
    """
    if document_frequency <= 0:
        return 0.0
    return math.log10(document_count / document_frequency)


def vector_magnitude(vector: Mapping[str, float]) -> float:
    return math.sqrt(sum(weight * weight for weight in vector.values()))


class TFIDFSearchEngine:
    """
    Ranks documents against free-text queries by cosine similarity of TF-IDF vectors.

    Query words are tokenized exactly like document content; and/or/not have
    no special meaning here and are scored like any other word.
    """

    def __init__(self, index: CorpusIndex):
        """
        Initialize the TF-IDF search engine.

        Args:
            index: CorpusIndex produced by InvertedIndexBuilder
        """
        self.index = index
        # The index never changes, so document norms are computed once
        self.doc_magnitudes: Dict[int, float] = {
            doc_id: vector_magnitude(self.document_vector(doc_id))
            for doc_id in index.document_ids
        }

    def idf(self, term: str) -> float:
        return compute_idf(self.index.document_count, self.index.document_frequency(term))

    def weight(self, term: str, freq: int) -> float:
        """TF-IDF weight of a term with raw frequency ``freq`` in some context."""
        if freq <= 0:
            return 0.0
        return compute_tf(freq) * self.idf(term)

    def document_vector(self, doc_id: int) -> Dict[str, float]:
        """TF-IDF vector over every term of a document."""
        return {term: self.weight(term, freq) for term, freq in self.index.term_counts(doc_id).items()}

    def query_vector(self, query: str) -> Dict[str, float]:
        """TF-IDF vector of a query, built from the query's own term counts."""
        query_counts = Counter(tokenize(query))
        return {term: self.weight(term, freq) for term, freq in query_counts.items()}

    def search(self, query: str, top_k: int = 10) -> List[SearchResult]:
        """
        Search for documents matching the query.

        Args:
            query: Query string
            top_k: Maximum number of results to return

        Returns:
            Results sorted by descending score (ties by ascending document ID),
            every score in (0, 1]
        """
        if top_k <= 0:
            return []

        query_vector = self.query_vector(query)
        query_magnitude = vector_magnitude(query_vector)
        if query_magnitude == 0:
            logger.debug("Query '%s' has no weighted terms", query)
            return []

        results = []
        for doc_id in self.index.document_ids:
            doc_magnitude = self.doc_magnitudes[doc_id]
            if doc_magnitude == 0:
                continue

            dot_product = 0.0
            for term, query_weight in query_vector.items():
                dot_product += query_weight * self.weight(term, self.index.count(term, doc_id))

            similarity = dot_product / (query_magnitude * doc_magnitude)
            if similarity > 0:
                results.append(SearchResult(document_id=doc_id, score=min(similarity, 1.0)))

        results.sort(key=lambda result: (-result.score, result.document_id))
        logger.debug("Ranked query '%s' matched %d documents", query, len(results))
        return results[:top_k]
