"""
Exceptions raised by WikiRetriever components.
"""


class RetrieverError(Exception):
    """Base class for all WikiRetriever errors."""


class IndexAlreadyBuiltError(RetrieverError):
    """Raised when an InvertedIndexBuilder is asked to build a second time."""


class ConfigError(RetrieverError):
    """Raised when an explicitly requested configuration file cannot be used."""


class DocumentFetchError(RetrieverError):
    """Raised when a single document cannot be fetched or parsed."""

    def __init__(self, topic: str, reason: str):
        super().__init__(f"Error fetching article for '{topic}': {reason}")
        self.topic = topic
        self.reason = reason
