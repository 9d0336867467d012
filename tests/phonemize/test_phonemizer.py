"""End-to-end tests for the note phonemizer."""

import logging

import pytest

from deltaphon.alias.catalog import VoicebankCatalog
from deltaphon.config import Settings
from deltaphon.g2p.dictionary import G2pDictionary, G2pResolver
from deltaphon.language.delta_english import CMUDICT_REPLACEMENTS, DELTA_ENGLISH
from deltaphon.phonemize import Phonemizer, split_phrases
from deltaphon.types import ConfigurationError, Note

WORDS = {
    "cat": ["k", "ae", "t"],
    "sat": ["s", "ae", "t"],
    "ah": ["aa"],
}


def _phonemizer(aliases, **kwargs):
    g2p = G2pResolver(G2pDictionary(WORDS), CMUDICT_REPLACEMENTS)
    return Phonemizer(DELTA_ENGLISH, VoicebankCatalog.from_aliases(aliases), g2p, **kwargs)


def _note(lyric, position, tone=60, duration=500.0, hint=None):
    return Note(lyric=lyric, tone=tone, position=position, duration=duration, phonetic_hint=hint)


class TestSplitPhrases:
    def test_rest_splits(self):
        notes = [_note("a", 0), _note("b", 500), _note("c", 1200)]
        assert split_phrases(notes) == [[0, 1], [2]]

    def test_sorted_by_position(self):
        notes = [_note("b", 500), _note("a", 0)]
        assert split_phrases(notes) == [[1, 0]]

    def test_empty(self):
        assert split_phrases([]) == []


class TestPhonemize:
    def test_single_word(self):
        results = _phonemizer(["- k{", "{ t-"]).phonemize([_note("cat", 0)])
        assert len(results) == 1
        assert results[0].aliases == ["- k{", "{ t-"]
        assert [u.transition_ms for u in results[0].units] == [200.0, 200.0]

    def test_transition_base(self):
        results = _phonemizer(["- k{", "{ t-"], transition_ms=50.0).phonemize([_note("cat", 0)])
        assert results[0].units[0].transition_ms == 100.0

    def test_held_vowel(self):
        notes = [_note("ah", 0), _note("+", 500)]
        results = _phonemizer(["- A", "A A", "A -"]).phonemize(notes)
        assert results[0].aliases == ["- A"]
        assert results[1].aliases == ["A -"]

    def test_extension_with_pitch_change(self):
        notes = [_note("ah", 0), _note("+", 500, tone=62)]
        results = _phonemizer(["- A", "A A", "A -"]).phonemize(notes)
        assert results[1].aliases == ["A A", "A -"]
        assert [u.tone for u in results[1].units] == [62, 62]

    def test_extension_after_final_consonant(self):
        notes = [_note("cat", 0), _note("+", 500)]
        results = _phonemizer(["- k{", "{ t-", "{ t{", "{ -"]).phonemize(notes)
        assert results[0].aliases == ["- k{"]
        assert results[1].aliases == ["{ t-"]

    def test_extension_after_final_consonant_with_pitch_change(self):
        notes = [_note("cat", 0), _note("+", 500, tone=64)]
        results = _phonemizer(["- k{", "{ {", "{ t-", "{ t{"]).phonemize(notes)
        assert results[0].aliases == ["- k{"]
        assert results[1].aliases == ["{ {", "{ t-"]
        assert [u.tone for u in results[1].units] == [64, 64]

    def test_ending_moves_to_last_extension(self):
        notes = [_note("cat", 0), _note("+", 500), _note("+", 1000)]
        results = _phonemizer(["- k{", "{ t-"]).phonemize(notes)
        assert results[0].aliases == ["- k{"]
        assert results[1].aliases == []
        assert results[2].aliases == ["{ t-"]

    def test_extension_at_phrase_start_is_silent(self):
        results = _phonemizer(["- k{", "{ t-"]).phonemize([_note("+", 0)])
        assert results[0].aliases == []

    def test_cross_word_cluster(self):
        notes = [_note("cat", 0), _note("sat", 500, tone=62)]
        results = _phonemizer(["- k{", "{ t", "ts", "s{", "{ t-"]).phonemize(notes)
        assert results[0].aliases == ["- k{"]
        assert results[1].aliases == ["{ t", "ts", "s{", "{ t-"]
        assert [u.tone for u in results[1].units] == [60, 60, 62, 62]

    def test_rest_restarts_the_word(self):
        notes = [_note("cat", 0), _note("cat", 1000)]
        results = _phonemizer(["- k{", "{ t-"]).phonemize(notes)
        assert results[0].aliases == ["- k{", "{ t-"]
        assert results[1].aliases == ["- k{", "{ t-"]

    def test_phonetic_hint_overrides_lyric(self):
        results = _phonemizer(["- k{", "{ t-"]).phonemize([_note("whatever", 0, hint="k { t")])
        assert results[0].aliases == ["- k{", "{ t-"]

    def test_bad_hint_raises(self):
        with pytest.raises(ConfigurationError):
            _phonemizer(["- k{"]).phonemize([_note("cat", 0, hint="k qq t")])

    def test_unknown_word_uses_lyric(self, caplog):
        notes = [_note("cat", 0), _note("xyzzy", 500)]
        with caplog.at_level(logging.WARNING):
            results = _phonemizer(["- k{", "{ t-"]).phonemize(notes)
        assert results[0].aliases == ["- k{", "{ t-"]
        assert results[1].aliases == ["xyzzy"]
        assert "xyzzy" in caplog.text

    def test_diphthong_split_when_missing(self):
        results = _phonemizer(["- a", "a I", "I -"]).phonemize([_note("x", 0, hint="aI")])
        assert results[0].aliases == ["- a", "a I", "I -"]

    def test_diphthong_kept_when_recorded(self):
        results = _phonemizer(["baI", "- aI", "aI -"]).phonemize([_note("x", 0, hint="aI")])
        assert results[0].aliases == ["- aI", "aI -"]

    def test_deterministic(self):
        phonemizer = _phonemizer(["- k{", "{ t", "ts", "s{", "{ t-"])
        notes = [_note("cat", 0), _note("sat", 500), _note("ah", 1500)]
        first = [r.to_dict() for r in phonemizer.phonemize(notes)]
        second = [r.to_dict() for r in phonemizer.phonemize(notes)]
        assert first == second

    def test_failed_syllable_is_isolated(self, monkeypatch, caplog):
        phonemizer = _phonemizer(["- k{", "{ t-", "- s{"])
        original = phonemizer.compiler.compile_syllable
        calls = []

        def flaky(syllable):
            calls.append(syllable)
            if len(calls) == 1:
                raise IndexError("boom")
            return original(syllable)

        monkeypatch.setattr(phonemizer.compiler, "compile_syllable", flaky)
        notes = [_note("cat", 0), _note("sat", 1000)]
        with caplog.at_level(logging.ERROR):
            results = phonemizer.phonemize(notes)
        assert results[0].aliases == ["{", "{ t-"]
        assert results[1].aliases == ["- s{", "{ t-"]
        assert "Failed to compile" in caplog.text


def test_from_settings(tmp_path):
    settings = Settings(data_dir=tmp_path / "data", cache_dir=tmp_path / "cache")
    phonemizer = Phonemizer.from_settings(VoicebankCatalog.from_aliases(["- lV"]), settings)
    assert (settings.plugins_dir / "xsampa.yaml").exists()
    assert phonemizer.language is DELTA_ENGLISH
    assert phonemizer.get_symbols(_note("love", 0)) == ["l", "V", "v"]
