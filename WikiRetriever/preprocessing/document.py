import json
from typing import Any, Dict, List, Mapping, Union

from .tokenizer import tokenize


class Document:
    """
    Represents a document in the information retrieval system.
    Only ``id`` and ``content`` take part in indexing; ``title`` is informational.
    """

    def __init__(self, id: int, content: str = "", title: str = ""):
        """
        Initialize a document.

        Args:
            id: Positive integer identifier, expected to be unique in a corpus
            content: Main document text
            title: Optional document title
        """
        self.id = id
        self.content = content or ""
        self.title = title or ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_id: int = None) -> "Document":
        """
        Build a document from a mapping with ``id``, ``content`` and ``title`` keys.

        ``text`` is accepted as an alias for ``content``. A missing or null id
        falls back to ``default_id``.
        """
        doc_id = data.get("id")
        if doc_id is None:
            doc_id = default_id
        if doc_id is None:
            raise ValueError("Document has no id")
        return cls(
            id=int(doc_id),
            content=data.get("content", data.get("text", "")),
            title=data.get("title", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "content": self.content}

    def tokenize(self) -> List[str]:
        """Tokens of the document content."""
        return tokenize(self.content)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.id, self.content, self.title) == (other.id, other.content, other.title)

    def __hash__(self):
        return hash((self.id, self.content, self.title))

    def __repr__(self):
        return f"Document(id={self.id!r}, title={self.title!r}, content={len(self.content)} chars)"


DocumentLike = Union[Document, Mapping[str, Any]]


def as_document(item: DocumentLike, position: int = 0) -> Document:
    """
    Coerce a Document or a mapping into a Document.

    Args:
        item: Document instance or mapping
        position: Zero-based position of the item in its corpus; a mapping
            without an id gets ``position + 1``

    Returns:
        Document instance
    """
    if isinstance(item, Document):
        return item
    if not isinstance(item, Mapping):
        raise ValueError(f"Corpus entry {position + 1} is not a document object: {item!r}")
    return Document.from_dict(item, default_id=position + 1)


def load_documents(documents_path: str) -> List[Document]:
    """
    Load a corpus from a JSON file containing a list of document objects.

    Args:
        documents_path: Path to the JSON file

    Returns:
        Documents in file order; entries without an id get their 1-based position
    """
    with open(documents_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{documents_path} must contain a JSON array of documents")

    return [as_document(item, i) for i, item in enumerate(data)]
