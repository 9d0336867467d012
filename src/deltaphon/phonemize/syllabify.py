"""Syllabification: phoneme stream with tones → syllables plus one ending."""

from typing import Sequence

from deltaphon.language import Language
from deltaphon.types import Ending, Syllable


def syllabify(
    phonemes: Sequence[str],
    tones: Sequence[int],
    language: Language,
    note_indices: Sequence[int] | None = None,
) -> tuple[list[Syllable], Ending]:
    """Split a phrase's phonemes at every vowel.

    Consonants before a vowel become its onset cluster; consonants after
    the last vowel become the ending's coda.

    Args:
        phonemes: Symbols for the whole phrase.
        tones: Tone of the note each symbol belongs to (parallel list).
        language: Inventory every symbol is validated against.
        note_indices: Note each symbol belongs to (parallel list).
            Defaults to 0 for every symbol.

    Raises:
        ValueError: on empty input or mismatched lengths.
        ConfigurationError: on a symbol the language does not declare.
    """
    if not phonemes:
        raise ValueError("Cannot syllabify an empty phoneme sequence")
    if note_indices is None:
        note_indices = [0] * len(phonemes)
    if len(tones) != len(phonemes) or len(note_indices) != len(phonemes):
        raise ValueError(
            f"phonemes ({len(phonemes)}), tones ({len(tones)}) and "
            f"note_indices ({len(note_indices)}) must have same length"
        )

    for p in phonemes:
        language.symbols.validate(p)
    is_vowel = language.symbols.is_vowel

    syllables: list[Syllable] = []
    prev_vowel: str | None = None
    prev_tone: int | None = None
    cc: list[str] = []

    for phoneme, tone, note_index in zip(phonemes, tones, note_indices):
        if not is_vowel(phoneme):
            cc.append(phoneme)
            continue
        syllables.append(Syllable(
            prev_vowel=prev_vowel,
            cc=cc,
            vowel=phoneme,
            tone=prev_tone if prev_tone is not None else tone,
            vowel_tone=tone,
            note_index=note_index,
        ))
        prev_vowel, prev_tone, cc = phoneme, tone, []

    ending = Ending(
        prev_vowel=prev_vowel,
        cc=cc,
        tone=prev_tone if prev_tone is not None else tones[-1],
        note_index=syllables[-1].note_index if syllables else note_indices[-1],
    )
    return syllables, ending
