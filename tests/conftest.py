"""Shared fakes and fixtures for the CyberBot tests."""

import random

import pytest

from cyberbot.knowledge import KnowledgeBase
from cyberbot.memory import UsageMemory
from cyberbot.persistence import InMemoryKeywordStore


class FakeUI:
    """Records everything the dispatcher emits and replays scripted input."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.responses = []
        self.system_messages = []
        self.errors = []
        self.prompts = []

    def read_line(self, user_name):
        self.prompts.append(user_name)
        if not self.lines:
            return None
        line = self.lines.pop(0)
        if isinstance(line, Exception):
            raise line
        return line

    def show_response(self, text):
        self.responses.append(text)

    def display_system_message(self, text):
        self.system_messages.append(text)

    def display_error(self, text):
        self.errors.append(text)


class FailingStore:
    """Store whose writes always fail."""

    def __init__(self):
        self.attempts = 0

    def load(self):
        return {}

    def save(self, counts):
        self.attempts += 1
        raise OSError("disk full")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def kb(rng):
    return KnowledgeBase(rng=rng)


@pytest.fixture
def store():
    return InMemoryKeywordStore()


@pytest.fixture
def memory(store, rng):
    return UsageMemory(store, rng=rng)


@pytest.fixture
def ui():
    return FakeUI()
