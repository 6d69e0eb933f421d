from typing import Iterable, List

from cyberbot.config import MIN_KEYWORD_LENGTH
from cyberbot.utils import split_words


class KeywordExtractor:
    """Pulls meaningful words out of a line of user text.

    ``ignored_words`` is either a collection of stop words or any object with
    an ``is_ignored_word`` method, such as the KnowledgeBase.
    """

    def __init__(self, min_length: int = MIN_KEYWORD_LENGTH):
        self.min_length = min_length

    def extract(self, text: str, ignored_words) -> List[str]:
        is_ignored = self._ignored_test(ignored_words)
        keywords = []
        for token in split_words(text):
            word = token.strip().lower()
            if len(word) >= self.min_length and not is_ignored(word):
                keywords.append(word)
        return keywords

    @staticmethod
    def distinct(keywords: Iterable[str]) -> List[str]:
        # dict keeps first-occurrence order
        return list(dict.fromkeys(keywords))

    @staticmethod
    def _ignored_test(ignored_words):
        if ignored_words is None:
            return lambda word: False
        if hasattr(ignored_words, "is_ignored_word"):
            return ignored_words.is_ignored_word
        lowered = {w.lower() for w in ignored_words}
        return lambda word: word in lowered
