"""Tests for usage memory: counts, summaries, prefixes and the user name."""

import random

import pytest

from cyberbot.config import NO_QUESTIONS_MESSAGE, REPEAT_PREFIXES
from cyberbot.memory import UsageMemory
from cyberbot.persistence import InMemoryKeywordStore

from conftest import FailingStore


def test_record_is_case_insensitive(memory):
    memory.record_keyword("VPN")
    memory.record_keyword("vpn")
    memory.record_keyword(" Vpn ")
    assert memory.get_count("vpn") == 3
    assert memory.get_count("VPN") == 3


def test_unseen_keyword_counts_zero(memory):
    assert memory.get_count("firewall") == 0


def test_blank_keyword_is_ignored(memory, store):
    memory.record_keyword("   ")
    assert memory.keyword_counts == {}
    assert store.saves == 0


def test_every_record_is_saved(memory, store):
    memory.record_keyword("password")
    memory.record_keyword("vpn")
    assert store.saves == 2
    assert store.text == "password:1\nvpn:1\n"


def test_most_frequent_topic_empty(memory):
    assert memory.most_frequent_topic_message() == NO_QUESTIONS_MESSAGE


def test_most_frequent_topic(memory):
    for _ in range(3):
        memory.record_keyword("password")
    memory.record_keyword("vpn")
    assert memory.most_frequent_topic_message() == "Your most frequent topic so far is 'password' (3 times)."


def test_most_frequent_topic_tie_goes_to_first_inserted(memory):
    memory.record_keyword("vpn")
    memory.record_keyword("phishing")
    memory.record_keyword("phishing")
    memory.record_keyword("vpn")
    assert "'vpn' (2 times)" in memory.most_frequent_topic_message()


def test_contextual_prefix_tiers(memory):
    assert memory.contextual_prefix("phishing", "Base.", 0) == "Base."
    assert memory.contextual_prefix("phishing", "Base.", 1) == "Base."

    second = memory.contextual_prefix("phishing", "Base.", 2)
    assert second.endswith("Base.")
    assert "phishing" in second[:-len("Base.")]

    third = memory.contextual_prefix("phishing", "Base.", 3)
    assert third.endswith("Base.")
    assert "interested in phishing" in third

    fifth = memory.contextual_prefix("phishing", "Base.", 5)
    assert "5" in fifth
    assert fifth.endswith("Base.")


def test_contextual_prefix_uses_every_phrasing():
    memory = UsageMemory(InMemoryKeywordStore(), rng=random.Random(3))
    seen = {memory.contextual_prefix("vpn", "", 2) for _ in range(100)}
    assert seen == {p.format(keyword="vpn", count=2) for p in REPEAT_PREFIXES[2]}


def test_user_name_default_and_trim(memory):
    assert memory.user_name == "User"
    memory.user_name = "  Ada Lovelace "
    assert memory.user_name == "Ada Lovelace"
    assert memory.name_recall_message() == "Your name is Ada Lovelace. Have you forgotten?"


@pytest.mark.parametrize("bad", ["", "   ", None])
def test_user_name_rejects_blank(memory, bad):
    with pytest.raises(ValueError):
        memory.user_name = bad
    assert memory.user_name == "User"


def test_loads_counts_from_store():
    memory = UsageMemory(InMemoryKeywordStore("phishing:4\nbogus\nvpn:x\nwifi:2\n"))
    assert memory.get_count("phishing") == 4
    assert memory.get_count("wifi") == 2
    assert memory.get_count("vpn") == 0


def test_save_failure_is_not_raised(capsys):
    store = FailingStore()
    memory = UsageMemory(store)
    memory.record_keyword("vpn")
    assert memory.get_count("vpn") == 1
    assert store.attempts == 1
    assert "Could not save keyword counts" in capsys.readouterr().out


def test_keyword_counts_is_a_copy(memory):
    memory.record_keyword("vpn")
    counts = memory.keyword_counts
    counts["vpn"] = 99
    assert memory.get_count("vpn") == 1
