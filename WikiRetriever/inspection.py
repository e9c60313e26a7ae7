"""
Plain-text dumps of the index structures, for debugging.
"""
from typing import List

from .build_inverted_index import CorpusIndex


def dump_inverted_index(index: CorpusIndex) -> str:
    """
    Render the inverted index, terms in lexical order.

    Each line reads ``term: [1, 2, 3]`` with document IDs ascending.
    """
    lines = ["Inverted Index:", "--------------"]
    for term in sorted(index.inverted_index):
        doc_ids = sorted(index.inverted_index[term])
        lines.append(f"{term}: [{', '.join(str(doc_id) for doc_id in doc_ids)}]")
    return "\n".join(lines)


def dump_occurrence_matrix(index: CorpusIndex) -> str:
    """
    Render the term x document occurrence matrix.

    One column per document ID (ascending) and one row per term in the order
    terms were first indexed; missing cells read 0.
    """
    doc_ids = sorted(index.document_ids)

    header = "Term" + "".join(f"\t| Doc {doc_id}" for doc_id in doc_ids)
    lines: List[str] = [header, "-" * len(header)]

    for term, doc_counts in index.occurrence_matrix.items():
        lines.append(term + "".join(f"\t| {doc_counts.get(doc_id, 0)}" for doc_id in doc_ids))

    return "\n".join(lines)
