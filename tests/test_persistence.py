"""Tests for the keyword count store."""

import os

from cyberbot.memory import UsageMemory
from cyberbot.persistence import InMemoryKeywordStore, KeywordStore, format_records, parse_records


def test_parse_records_skips_malformed_lines():
    lines = ["password:3", "no separator", ":5", "vpn:-1", "wifi: 2 ", "email:two", "PHISHING:1", ""]
    assert parse_records(lines) == {"password": 3, "wifi": 2, "phishing": 1}


def test_format_records():
    assert format_records({"vpn": 1, "2fa": 10}) == "vpn:1\n2fa:10\n"


def test_missing_file_loads_empty(tmp_path):
    store = KeywordStore(str(tmp_path / "missing.txt"))
    assert store.load() == {}


def test_save_and_reload_round_trip(tmp_path):
    path = str(tmp_path / "user_keywords.txt")
    memory = UsageMemory(KeywordStore(path))
    for word in ["password", "password", "vpn", "2fa", "password", "wi-fi"]:
        memory.record_keyword(word)

    reloaded = UsageMemory(KeywordStore(path))
    for word in ["password", "vpn", "2fa", "wi-fi"]:
        assert reloaded.get_count(word) == memory.get_count(word)
    assert reloaded.keyword_counts == memory.keyword_counts


def test_save_rewrites_whole_file_and_keeps_backup(tmp_path):
    path = tmp_path / "counts.txt"
    store = KeywordStore(str(path))
    assert store.save({"vpn": 1})
    assert store.save({"vpn": 2, "email": 1})
    assert path.read_text(encoding="utf-8") == "vpn:2\nemail:1\n"
    assert (tmp_path / "counts.txt.bak").read_text(encoding="utf-8") == "vpn:1\n"
    # no temp files left behind
    assert sorted(os.listdir(tmp_path)) == ["counts.txt", "counts.txt.bak"]


def test_load_falls_back_to_backup(tmp_path, capsys):
    path = tmp_path / "counts.txt"
    (tmp_path / "counts.txt.bak").write_text("phishing:7\n", encoding="utf-8")
    assert KeywordStore(str(path)).load() == {"phishing": 7}
    assert "backup" in capsys.readouterr().out


def test_save_failure_returns_false(tmp_path, capsys):
    store = KeywordStore(str(tmp_path / "no_such_dir" / "counts.txt"))
    assert store.save({"vpn": 1}) is False
    assert "Error during save" in capsys.readouterr().out


def test_unreadable_file_loads_empty(tmp_path, capsys):
    path = tmp_path / "counts.txt"
    path.mkdir()
    assert KeywordStore(str(path)).load() == {}
    assert "Warning" in capsys.readouterr().out


def test_in_memory_store_round_trip():
    store = InMemoryKeywordStore()
    store.save({"vpn": 3})
    assert store.load() == {"vpn": 3}
    assert store.saves == 1
