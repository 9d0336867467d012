"""Tests for the g2p_en fallback."""

from unittest.mock import MagicMock

import pytest

from deltaphon.cache import get_cached_g2p
from deltaphon.g2p.arpabet import ArpabetG2p, strip_stress


@pytest.fixture
def fake_model(monkeypatch):
    model = MagicMock(return_value=["K", "AE1", "T"])
    monkeypatch.setattr("deltaphon.g2p.arpabet._get_g2p", lambda: model)
    return model


def test_strip_stress():
    assert strip_stress("AH0") == "ah"
    assert strip_stress("K") == "k"


def test_query_strips_stress_and_caches(fake_model, tmp_path):
    g2p = ArpabetG2p(cache_dir=tmp_path)
    assert g2p.query("Cat!") == ["k", "ae", "t"]
    fake_model.assert_called_once_with("cat")
    assert get_cached_g2p("cat", tmp_path) == ["k", "ae", "t"]


def test_second_query_hits_cache(fake_model, tmp_path):
    g2p = ArpabetG2p(cache_dir=tmp_path)
    g2p.query("cat")
    g2p.query("cat")
    assert fake_model.call_count == 1


def test_no_cache(fake_model, tmp_path):
    g2p = ArpabetG2p(use_cache=False, cache_dir=tmp_path)
    g2p.query("cat")
    g2p.query("cat")
    assert fake_model.call_count == 2
    assert get_cached_g2p("cat", tmp_path) is None


def test_non_alphabetic_word(fake_model, tmp_path):
    assert ArpabetG2p(cache_dir=tmp_path).query("123") is None
    fake_model.assert_not_called()


def test_punctuation_tokens_dropped(fake_model, tmp_path):
    fake_model.return_value = [" ", "K", ",", "AE1"]
    assert ArpabetG2p(cache_dir=tmp_path).query("ka") == ["k", "ae"]


def test_model_produces_nothing(fake_model, tmp_path):
    fake_model.return_value = []
    assert ArpabetG2p(cache_dir=tmp_path).query("hmm") is None
