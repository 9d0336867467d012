"""Phonemize pipeline: notes → symbols → syllables → alias units per note."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, Sequence

from deltaphon.alias.catalog import VoicebankCatalog
from deltaphon.alias.compiler import AliasCompiler, same_vowel_same_tone
from deltaphon.alias.resolver import AliasResolver
from deltaphon.alias.timing import transition_length
from deltaphon.config import DEFAULT_TRANSITION_MS, Settings, load_settings
from deltaphon.g2p import G2pResolver
from deltaphon.language import Language, get_language
from deltaphon.phonemize.syllabify import syllabify
from deltaphon.types import (
    AliasUnit,
    ConfigurationError,
    Note,
    PhonemizedNote,
    Syllable,
    UnknownWordError,
)

logger = logging.getLogger(__name__)


def split_phrases(notes: Sequence[Note]) -> list[list[int]]:
    """Group note indices into phrases; a rest between two notes ends a phrase."""
    order = sorted(range(len(notes)), key=lambda i: notes[i].position)
    phrases: list[list[int]] = []
    for i in order:
        if phrases and notes[i].position <= notes[phrases[-1][-1]].end + 1e-6:
            phrases[-1].append(i)
        else:
            phrases.append([i])
    return phrases


class Phonemizer:
    """Turns a list of notes into alias units for one voicebank.

    Args:
        language: Symbol tables and rewrite rules.
        catalog: Aliases the voicebank has.
        g2p: Dictionary chain for lyrics.
        transition_ms: Base transition length, scaled per alias.
        can_extend: Alias extension test for held vowels.
    """

    def __init__(
        self,
        language: Language,
        catalog: VoicebankCatalog,
        g2p: G2pResolver,
        transition_ms: float = DEFAULT_TRANSITION_MS,
        can_extend: Callable[[Syllable], bool] = same_vowel_same_tone,
    ):
        self.language = language
        self.g2p = g2p
        self.transition_ms = transition_ms
        self.resolver = AliasResolver(catalog, language.rules)
        self.compiler = AliasCompiler(self.resolver, language, can_extend=can_extend)

    @classmethod
    def from_settings(
        cls,
        catalog: VoicebankCatalog,
        settings: Settings | None = None,
        voicebank_dir: Path | None = None,
        use_cache: bool = True,
    ) -> "Phonemizer":
        """Build a phonemizer for the configured language and dictionaries."""
        settings = settings or load_settings()
        language = get_language(settings.language)
        g2p = language.dictionary(
            settings.plugins_dir,
            voicebank_dir=voicebank_dir,
            use_cache=use_cache,
            cache_dir=settings.cache_dir,
        )
        return cls(language, catalog, g2p, transition_ms=settings.transition_ms)

    def get_symbols(self, note: Note, prev_vowel: str | None = None) -> list[str]:
        """Symbols for one note, after splitting units the voicebank lacks.

        Raises:
            UnknownWordError: if no dictionary knows the lyric and the note
                has no phonetic hint.
            ConfigurationError: if a hint uses an undeclared symbol.
        """
        if note.phonetic_hint:
            symbols = note.phonetic_hint.split()
            for s in symbols:
                self.language.symbols.validate(s)
        elif note.is_extension:
            symbols = [prev_vowel] if prev_vowel else []
        else:
            symbols = self.g2p.resolve(note.lyric)
            if symbols is None:
                raise UnknownWordError(note.lyric)
        return self.language.split_symbols(
            symbols, lambda alias: self.resolver.available(alias, note.tone)
        )

    def phonemize(self, notes: Sequence[Note]) -> list[PhonemizedNote]:
        """Phonemize a whole track. The result is parallel to ``notes``."""
        results = [PhonemizedNote(i, note) for i, note in enumerate(notes)]
        for phrase in split_phrases(notes):
            self._phonemize_phrase(notes, phrase, results)
        return results

    def _phonemize_phrase(
        self, notes: Sequence[Note], phrase: list[int], results: list[PhonemizedNote]
    ) -> None:
        symbols: list[str] = []
        tones: list[int] = []
        owners: list[int] = []
        prev_vowel = None

        for idx in phrase:
            note = notes[idx]
            try:
                note_symbols = self.get_symbols(note, prev_vowel)
            except UnknownWordError:
                logger.warning(f"No dictionary entry for {note.lyric!r}; using the lyric as alias")
                # an unknown word cuts the phrase in two
                self._compile(symbols, tones, owners, results)
                symbols, tones, owners, prev_vowel = [], [], [], None
                results[idx].units = [self._timed(AliasUnit(note.lyric, note.tone))]
                continue
            for s in note_symbols:
                if self.language.symbols.is_vowel(s):
                    prev_vowel = s
            split = len(symbols)
            if note.is_extension and not note.phonetic_hint and note_symbols:
                # the held vowel goes before the word's final consonants,
                # which move onto the extension note
                while split > 0 and not self.language.symbols.is_vowel(symbols[split - 1]):
                    split -= 1
            symbols[split:split] = note_symbols
            tones[split:] = [note.tone] * (len(symbols) - split)
            owners[split:] = [idx] * (len(symbols) - split)

        self._compile(symbols, tones, owners, results)

    def _compile(
        self,
        symbols: list[str],
        tones: list[int],
        owners: list[int],
        results: list[PhonemizedNote],
    ) -> None:
        if not symbols:
            return
        syllables, ending = syllabify(symbols, tones, self.language, note_indices=owners)
        for syllable in syllables:
            units = self._isolated(
                self.compiler.compile_syllable, syllable,
                [AliasUnit(syllable.vowel, syllable.vowel_tone)],
            )
            results[syllable.note_index].units.extend(self._timed(u) for u in units)
        units = self._isolated(self.compiler.compile_ending, ending, [])
        results[ending.note_index].units.extend(self._timed(u) for u in units)

    @staticmethod
    def _isolated(compile_fn, item, fallback: list[AliasUnit]) -> list[AliasUnit]:
        """Compile one syllable or ending without letting it sink the rest."""
        try:
            return compile_fn(item)
        except ConfigurationError:
            raise
        except (IndexError, KeyError, ValueError):
            logger.exception(f"Failed to compile {item!r}; falling back to {fallback}")
            return fallback

    def _timed(self, unit: AliasUnit) -> AliasUnit:
        return replace(
            unit,
            transition_ms=transition_length(unit.alias, self.transition_ms, self.language),
        )


__all__ = ["Phonemizer", "split_phrases"]
