from collections import deque
from typing import List

from cyberbot.config import CHAT_BUFFER_SIZE


class ChatDisplayBuffer:
    """Holds the last N chat lines. Oldest lines drop off when it is full."""

    def __init__(self, capacity: int = CHAT_BUFFER_SIZE):
        if capacity < 5:
            raise ValueError("Capacity must be at least 5")
        self.capacity = capacity
        self._lines: deque = deque(maxlen=capacity)

    def add(self, line: str):
        self._lines.append(line)

    def lines(self) -> List[str]:
        return list(self._lines)

    def clear(self):
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
