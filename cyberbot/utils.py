from typing import List

# NLP
from nltk.tokenize import RegexpTokenizer

from cyberbot.config import KEYWORD_DELIMITER_PATTERN

# Splits on the delimiters themselves; empty pieces are dropped by nltk.
_delimiter_tokenizer = RegexpTokenizer(KEYWORD_DELIMITER_PATTERN, gaps=True)


def normalize(text: str) -> str:
    return (text or "").strip().lower()


def split_words(text: str) -> List[str]:
    if not text or not text.strip():
        return []
    return _delimiter_tokenizer.tokenize(text)


def contains_any(text: str, phrases) -> bool:
    """Case-insensitive substring test against a collection of phrases."""
    lower = (text or "").lower()
    return any(phrase in lower for phrase in phrases)


def is_valid_name(name: str) -> bool:
    """Names may only hold letters and whitespace, and must not be blank."""
    if not name or not name.strip():
        return False
    return all(c.isalpha() or c.isspace() for c in name)
