"""
Tokenizer shared by indexing and querying.

Text is lowercased, every character that is neither a word character
(letter, digit, underscore) nor whitespace is dropped, and the rest is split on
runs of whitespace. No stemming and no stop word filtering.
"""
from typing import List


def is_word_char(char: str) -> bool:
    """True for letters, digits and the underscore."""
    return char.isalnum() or char == "_"


def normalize(text: str) -> str:
    """
    Lowercase the text and strip characters outside the word/space classes.

    Args:
        text: Raw text

    Returns:
        Normalized text, still containing its whitespace
    """
    return "".join(char for char in text.lower() if is_word_char(char) or char.isspace())


def tokenize(text: str) -> List[str]:
    """
    Split text into normalized word tokens.

    Args:
        text: Raw text (None and empty strings give no tokens)

    Returns:
        List of tokens in text order, never containing empty strings
    """
    if not text:
        return []
    return normalize(text).split()
