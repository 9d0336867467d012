"""Tests for the cache module."""

import pytest

from deltaphon.cache import (
    _g2p_cache_path,
    get_cached_g2p,
    store_g2p_cache,
    word_hash,
)


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    """Redirect cache to tmp_path so tests don't pollute the real cache."""
    monkeypatch.setattr("deltaphon.cache.CACHE_DIR", tmp_path / "cache")


def test_word_hash_deterministic():
    assert word_hash("hello") == word_hash("hello")
    assert word_hash("hello") != word_hash("world")
    assert len(word_hash("hello")) == 64  # SHA-256 hex


def test_g2p_cache_miss():
    assert get_cached_g2p("nonexistent") is None


def test_g2p_cache_roundtrip(tmp_path):
    store_g2p_cache("cat", ["k", "ae", "t"])
    assert get_cached_g2p("cat") == ["k", "ae", "t"]
    assert _g2p_cache_path("cat").parent == tmp_path / "cache" / "g2p"


def test_g2p_cache_explicit_dir(tmp_path):
    other = tmp_path / "elsewhere"
    store_g2p_cache("dog", ["d", "ao", "g"], cache_dir=other)
    assert get_cached_g2p("dog", cache_dir=other) == ["d", "ao", "g"]
    assert get_cached_g2p("dog") is None


def test_g2p_cache_corrupted_file():
    path = _g2p_cache_path("cat")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{not json")
    assert get_cached_g2p("cat") is None


def test_g2p_cache_no_temp_files_left(tmp_path):
    store_g2p_cache("cat", ["k", "ae", "t"])
    leftovers = list((tmp_path / "cache" / "g2p").glob("*.tmp"))
    assert leftovers == []
