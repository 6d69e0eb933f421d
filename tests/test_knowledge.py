"""Tests for the knowledge base."""

import random

import pytest

from cyberbot.knowledge import TOPIC_RESPONSES, KnowledgeBase


def test_get_response_is_case_insensitive(kb):
    assert kb.get_response("VPN") in TOPIC_RESPONSES["vpn"]
    assert kb.get_response("  Phishing ") in TOPIC_RESPONSES["phishing"]


def test_unknown_topic_returns_none(kb):
    assert kb.get_response("emails") is None
    assert kb.get_response("") is None
    assert kb.get_response(None) is None


def test_single_variant_topic_is_stable(kb):
    assert kb.get_response("purpose") == "I help people understand how to stay safer online."


def test_seeded_rng_makes_choice_repeatable():
    a = KnowledgeBase(rng=random.Random(7))
    b = KnowledgeBase(rng=random.Random(7))
    assert [a.get_response("password") for _ in range(10)] == [b.get_response("password") for _ in range(10)]


def test_variants_all_reachable():
    kb = KnowledgeBase(rng=random.Random(0))
    seen = {kb.get_response("password") for _ in range(200)}
    assert seen == set(TOPIC_RESPONSES["password"])


def test_is_ignored_word(kb):
    assert kb.is_ignored_word("the")
    assert kb.is_ignored_word("THANKS")
    assert not kb.is_ignored_word("phishing")
    assert not kb.is_ignored_word("")
    assert not kb.is_ignored_word("   ")


def test_list_topics_hides_meta_topics(kb):
    topics = kb.list_topics()
    for meta in ("help", "purpose", "how are you"):
        assert meta not in topics
    for topic in ("password", "2fa", "phishing", "privacy", "vpn", "wifi", "email"):
        assert topic in topics


def test_add_topic_normalizes_key(kb):
    kb.add_topic("  Firewall ", ["Keep your firewall on."])
    assert kb.get_response("firewall") == "Keep your firewall on."
    assert "firewall" in kb.list_topics()


def test_add_topic_rejects_empty_variants(kb):
    with pytest.raises(ValueError):
        kb.add_topic("firewall", [])
    with pytest.raises(ValueError):
        kb.add_topic("  ", ["x"])


def test_stop_words_are_immutable(kb):
    assert isinstance(kb.stop_words, frozenset)
