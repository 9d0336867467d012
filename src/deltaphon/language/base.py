"""Language definitions as plain values."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from deltaphon.language.rewrite import RewriteRules
from deltaphon.language.symbols import LanguageSymbols

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Language:
    """Everything the pipeline needs to know about one language.

    Args:
        tag: Registry key, e.g. "EN DELTA".
        name: Human readable name.
        symbols: Vowel/consonant inventory.
        replacements: Dictionary symbol -> internal symbol, applied to
            every G2P result.
        rules: Alias rewrite chain used when a candidate is missing.
        dictionary_name: File name of the editable YAML dictionary.
        template: Package resource name of the bundled dictionary.
        diphthongs: Vowels split into two letters when the voicebank
            lacks them.
        diphthong_check: Alias format used to test for a diphthong.
        affricate_check: Alias format used to test for an affricate.
        timing_exclusion: Alias marker that disables the normal
            consonant timing rule.
        timing_separator: Alias marker that disables the short
            consonant timing rule.
    """
    tag: str
    name: str
    symbols: LanguageSymbols
    replacements: dict[str, str] = field(default_factory=dict)
    rules: RewriteRules = field(default_factory=RewriteRules)
    dictionary_name: str = "xsampa.yaml"
    template: str = "xsampa.yaml"
    diphthongs: tuple[str, ...] = ()
    diphthong_check: str = "b{}"
    affricate_check: str = "i {}"
    timing_exclusion: str = "_D"
    timing_separator: str = " _"

    def __post_init__(self):
        cycles = self.rules.find_cycles()
        if cycles:
            logger.debug(f"{self.tag}: {len(cycles)} rewrite rule pair(s) can re-apply")

    def vowels(self) -> tuple[str, ...]:
        return self.symbols.vowels

    def consonants(self) -> tuple[str, ...]:
        return self.symbols.consonants

    def rewrite(self, alias: str) -> str:
        return self.rules.apply(alias)

    def dictionary(
        self,
        plugins_dir: Path,
        voicebank_dir: Path | None = None,
        use_cache: bool = True,
        cache_dir: Path | None = None,
    ):
        """Dictionary chain for this language: plugin file, voicebank override, g2p_en."""
        from deltaphon.g2p import build_g2p

        return build_g2p(
            self, plugins_dir,
            voicebank_dir=voicebank_dir, use_cache=use_cache, cache_dir=cache_dir,
        )

    def split_symbols(
        self, symbols: list[str], has_alias: Callable[[str], bool]
    ) -> list[str]:
        """Split diphthongs and affricates the voicebank was not recorded with."""
        result = []
        for s in symbols:
            if s in self.diphthongs and not has_alias(self.diphthong_check.format(s)):
                result.extend(self._letters(s))
            elif self.symbols.is_affricate(s) and not has_alias(self.affricate_check.format(s)):
                result.extend(self._letters(s))
            else:
                result.append(s)
        return result

    def _letters(self, symbol: str) -> list[str]:
        letters = list(symbol)
        for letter in letters:
            self.symbols.validate(letter)
        return letters
