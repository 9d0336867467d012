"""Transition (crossfade) length per alias from its consonants."""

from deltaphon.language import Language


def transition_length(alias: str, base_ms: float, language: Language) -> float:
    """Estimate how long the transition into an alias should last.

    Rules, first match wins:
    1. a long consonant anywhere but at the start doubles the length;
    2. a normal consonant anywhere but at the start keeps it, unless the
       alias carries the exclusion marker;
    3. a short consonant halves it, unless the alias has the separator;
    4. otherwise the base length.
    """
    symbols = language.symbols
    for c in symbols.long_consonants:
        if c in alias and not alias.startswith(c):
            return base_ms * 2.0

    if language.timing_exclusion not in alias:
        for c in symbols.normal_consonants:
            if c in alias and not alias.startswith(c):
                return base_ms

    if language.timing_separator not in alias:
        for c in symbols.short_consonants:
            if c in alias:
                return base_ms * 0.5

    return base_ms
