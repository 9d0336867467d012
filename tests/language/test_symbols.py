"""Tests for symbol inventories."""

import pytest

from deltaphon.language.symbols import LanguageSymbols, split_list
from deltaphon.types import ConfigurationError


def _symbols(**kwargs):
    defaults = dict(
        vowels=("a", "i"),
        consonants=("k", "l", "4", "tS"),
        affricates=("tS",),
        long_consonants=("k",),
        short_consonants=("4",),
    )
    defaults.update(kwargs)
    return LanguageSymbols(**defaults)


def test_split_list_drops_empty_items():
    assert split_list("a,,b,") == ("a", "b")
    assert split_list("a;b", sep=";") == ("a", "b")


def test_normal_consonants_derived_from_the_rest():
    assert _symbols().normal_consonants == ("l",)


def test_explicit_normal_consonants_kept():
    assert _symbols(normal_consonants=("l", "k")).normal_consonants == ("l", "k")


@pytest.mark.parametrize("field", ["affricates", "long_consonants", "short_consonants"])
def test_subset_must_be_declared_consonant(field):
    with pytest.raises(ConfigurationError, match="not declared as consonants"):
        _symbols(**{field: ("x",)})


def test_classification():
    symbols = _symbols()
    assert symbols.is_vowel("a")
    assert not symbols.is_vowel("k")
    assert symbols.is_consonant("tS")
    assert symbols.is_affricate("tS")
    assert not symbols.is_affricate("k")


def test_validate():
    symbols = _symbols()
    assert symbols.validate("a") == "a"
    assert symbols.validate("k") == "k"
    with pytest.raises(ConfigurationError, match="Unknown phoneme symbol"):
        symbols.validate("q")
