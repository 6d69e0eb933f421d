import random
from typing import Dict, Optional

from cyberbot.config import DEFAULT_USER_NAME, NO_QUESTIONS_MESSAGE, REPEAT_PREFIXES
from cyberbot.persistence import KeywordStore
from cyberbot.utils import normalize


# -----------------------------
# Usage Memory
# -----------------------------
class UsageMemory:
    """Per-keyword mention counts and the current user's name.

    Counts are loaded from ``store`` on construction and written back in full
    after every recorded keyword.
    """

    def __init__(self, store=None, rng: Optional[random.Random] = None):
        self.store = store if store is not None else KeywordStore()
        self.rng = rng or random.Random()
        self._user_name: Optional[str] = None
        self._counts: Dict[str, int] = self._load()

    @property
    def user_name(self) -> str:
        return self._user_name or DEFAULT_USER_NAME

    @user_name.setter
    def user_name(self, value: str):
        if value is None or not value.strip():
            raise ValueError("Username cannot be empty or whitespace.")
        self._user_name = value.strip()

    @property
    def keyword_counts(self) -> Dict[str, int]:
        return dict(self._counts)

    def record_keyword(self, keyword: str):
        key = normalize(keyword)
        if not key:
            return
        self._counts[key] = self._counts.get(key, 0) + 1
        self._save()

    def get_count(self, keyword: str) -> int:
        return self._counts.get(normalize(keyword), 0)

    def most_frequent_topic_message(self) -> str:
        if not self._counts:
            return NO_QUESTIONS_MESSAGE
        # max() keeps the first key it sees on ties, i.e. the earliest inserted
        key = max(self._counts, key=self._counts.get)
        return f"Your most frequent topic so far is '{key}' ({self._counts[key]} times)."

    def name_recall_message(self) -> str:
        return f"Your name is {self.user_name}. Have you forgotten?"

    def contextual_prefix(self, keyword: str, base_response: str, count: int) -> str:
        if count <= 1:
            return base_response
        tier = min(count, 4)
        prefix = self.rng.choice(REPEAT_PREFIXES[tier]).format(keyword=keyword, count=count)
        return prefix + base_response

    def _load(self) -> Dict[str, int]:
        try:
            return dict(self.store.load())
        except Exception as e:
            print(f"Warning: Could not load keyword counts: {e}")
            return {}

    def _save(self):
        try:
            self.store.save(self._counts)
        except Exception as e:
            print(f"Warning: Could not save keyword counts: {e}")
