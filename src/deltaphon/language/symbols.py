"""Per-language phoneme symbol tables."""

from dataclasses import dataclass, field

from deltaphon.types import ConfigurationError


def split_list(value: str, sep: str = ",") -> tuple[str, ...]:
    """Split a comma separated symbol list, dropping empty items."""
    return tuple(s for s in value.split(sep) if s)


@dataclass(frozen=True)
class LanguageSymbols:
    """Vowel and consonant inventory of one language.

    Tuples keep declaration order so anything iterating over a class
    (the timing rules do) is deterministic.
    """
    vowels: tuple[str, ...]
    consonants: tuple[str, ...]
    affricates: tuple[str, ...] = ()
    long_consonants: tuple[str, ...] = ()
    short_consonants: tuple[str, ...] = ()
    normal_consonants: tuple[str, ...] = field(default=())

    def __post_init__(self):
        consonants = set(self.consonants)
        for name in ("affricates", "long_consonants", "short_consonants", "normal_consonants"):
            stray = [c for c in getattr(self, name) if c not in consonants]
            if stray:
                raise ConfigurationError(
                    f"{name} not declared as consonants: {', '.join(stray)}"
                )
        if not self.normal_consonants:
            excluded = set(self.long_consonants) | set(self.short_consonants) | set(self.affricates)
            object.__setattr__(
                self, "normal_consonants",
                tuple(c for c in self.consonants if c not in excluded),
            )
        object.__setattr__(self, "_vowel_set", frozenset(self.vowels))
        object.__setattr__(self, "_consonant_set", frozenset(self.consonants))

    def is_vowel(self, symbol: str) -> bool:
        return symbol in self._vowel_set

    def is_consonant(self, symbol: str) -> bool:
        return symbol in self._consonant_set

    def is_affricate(self, symbol: str) -> bool:
        return symbol in self.affricates

    def validate(self, symbol: str) -> str:
        """Return symbol unchanged, or raise if it is outside the inventory."""
        if symbol in self._vowel_set or symbol in self._consonant_set:
            return symbol
        raise ConfigurationError(f"Unknown phoneme symbol {symbol!r}")
