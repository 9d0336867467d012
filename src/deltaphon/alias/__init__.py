"""Alias selection: catalog lookup, syllable compilation and transition timing."""

from deltaphon.alias.catalog import VoicebankCatalog
from deltaphon.alias.compiler import AliasCompiler, same_vowel_same_tone
from deltaphon.alias.resolver import AliasResolver
from deltaphon.alias.timing import transition_length

__all__ = [
    "AliasCompiler",
    "AliasResolver",
    "VoicebankCatalog",
    "same_vowel_same_tone",
    "transition_length",
]
