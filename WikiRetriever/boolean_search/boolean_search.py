import logging
import time
from typing import List, Optional, Set

from WikiRetriever.build_inverted_index import CorpusIndex
from WikiRetriever.search_interface import SearchResult
from .set_operations import difference, intersect, union

logger = logging.getLogger(__name__)

AND = "and"
OR = "or"
NOT = "not"
OPERATORS = (AND, OR, NOT)


class BooleanSearchEngine:
    """
    Evaluates flat boolean queries such as ``cat AND dog NOT bird``.

    Operators are applied strictly left to right with no precedence and no
    parentheses. The first term seeds the result set; every later term is
    combined with the most recent operator.
    """

    def __init__(self, index: CorpusIndex):
        """
        Initialize the search engine with a built index.

        Args:
            index: CorpusIndex produced by InvertedIndexBuilder
        """
        self.index = index

    def evaluate(self, query_string: str) -> Set[int]:
        """
        Evaluate a query to the set of matching document IDs.

        Args:
            query_string: Whitespace separated terms and and/or/not keywords

        Returns:
            Set of matching document IDs (empty for empty or operator-only queries)
        """
        results: Optional[Set[int]] = None
        operator: Optional[str] = None

        for part in query_string.lower().split():
            if part in OPERATORS:
                operator = part
                continue

            term_docs = self.index.postings(part)

            if results is None:
                # Seeding ignores a leading operator
                results = set(term_docs)
                continue

            if operator == AND:
                results = intersect(results, term_docs)
            elif operator == OR:
                results = union(results, term_docs)
            elif operator == NOT:
                results = difference(results, term_docs)
            else:
                logger.debug("No operator before term '%s'; term ignored", part)

        return results if results is not None else set()

    def search(self, query_string: str) -> List[SearchResult]:
        """
        Execute a boolean search query.

        Args:
            query_string: Boolean query string (and, or, not; case-insensitive)

        Returns:
            Matching documents in ascending ID order, each with score 1.0
        """
        start_time = time.time()
        doc_ids = sorted(self.evaluate(query_string))
        logger.debug(
            "Boolean query '%s' matched %d documents in %.6f seconds",
            query_string, len(doc_ids), time.time() - start_time,
        )
        return [SearchResult(document_id=doc_id, score=1.0) for doc_id in doc_ids]
