"""Turn syllables and endings into the alias units a voicebank can play.

Every decision goes through ``AliasResolver.resolve`` with a short,
fixed priority list of candidate spellings, so the output only depends on
the syllable and the catalog.

Alias shapes (Delta list conventions):

    - V      word-initial vowel          V -      word-final vowel
    - CV     word-initial CV             V C-     word-final VC
    V1 V2    vowel to vowel              C1 C2-   word-final cluster
    V C      vowel into consonant        C1C2     fused consonant pair
    CV       consonant into vowel        _CV      CV after a fused pair
"""

import logging
from typing import Callable

from deltaphon.alias.resolver import AliasResolver
from deltaphon.language import Language
from deltaphon.types import AliasUnit, Ending, Syllable

logger = logging.getLogger(__name__)


def same_vowel_same_tone(syllable: Syllable) -> bool:
    """Default extension test: the vowel is held on and the pitch does not move."""
    return syllable.prev_vowel == syllable.vowel and syllable.tone == syllable.vowel_tone


class AliasCompiler:
    """Compile one syllable or ending at a time.

    Args:
        resolver: Catalog lookup with the language's rewrite rules.
        language: Supplies the affricate set.
        can_extend: Decides whether a vowel-to-vowel syllable may simply
            lengthen the previous alias instead of starting a new one.
    """

    def __init__(
        self,
        resolver: AliasResolver,
        language: Language,
        can_extend: Callable[[Syllable], bool] = same_vowel_same_tone,
    ):
        self.resolver = resolver
        self.symbols = language.symbols
        self.can_extend = can_extend

    # --- primitives ---

    def _try_add(self, units: list[AliasUnit], tone: int, *candidates: str) -> str | None:
        alias = self.resolver.resolve(candidates, tone)
        if alias is not None:
            units.append(AliasUnit(alias, tone))
        return alias

    def _resolve_or_degrade(self, candidates: list[str], tone: int, fallback: str) -> str:
        """Resolve candidates, else the bare fallback symbol, which is used even if missing."""
        alias = self.resolver.resolve(candidates + [fallback], tone)
        if alias is None:
            logger.warning(
                f"Missing alias: none of {candidates} at tone {tone}, degrading to {fallback!r}"
            )
            alias = fallback
        return alias

    # --- syllables ---

    def compile_syllable(self, syllable: Syllable) -> list[AliasUnit]:
        if syllable.is_starting_v:
            return self._starting_v(syllable)
        if syllable.is_vv:
            return self._vv(syllable)
        if syllable.is_starting_cv_one:
            return self._starting_cv_one(syllable)
        if syllable.is_starting_cv_many:
            return self._starting_cv_many(syllable)
        return self._vcv(syllable)

    def _starting_v(self, syllable: Syllable) -> list[AliasUnit]:
        v = syllable.vowel
        alias = self._resolve_or_degrade([f"- {v}"], syllable.vowel_tone, v)
        return [AliasUnit(alias, syllable.vowel_tone)]

    def _vv(self, syllable: Syllable) -> list[AliasUnit]:
        if self.can_extend(syllable):
            # the previous alias is stretched over this note
            return []
        v = syllable.vowel
        alias = self._resolve_or_degrade([f"{syllable.prev_vowel} {v}"], syllable.vowel_tone, v)
        return [AliasUnit(alias, syllable.vowel_tone)]

    def _starting_cv_one(self, syllable: Syllable) -> list[AliasUnit]:
        c, v = syllable.cc[0], syllable.vowel
        units: list[AliasUnit] = []
        if self._try_add(units, syllable.vowel_tone, f"- {c}{v}"):
            return units
        self._try_add(units, syllable.tone, f"- {c}")
        base = self._resolve_or_degrade([f"{c}{v}"], syllable.vowel_tone, v)
        units.append(AliasUnit(base, syllable.vowel_tone))
        return units

    def _starting_cv_many(self, syllable: Syllable) -> list[AliasUnit]:
        cc, v = syllable.cc, syllable.vowel
        tone, vowel_tone = syllable.tone, syllable.vowel_tone
        units: list[AliasUnit] = []
        if self._try_add(units, vowel_tone, f"- {''.join(cc)}{v}"):
            return units

        ucv = f"_{cc[-1]}{v}"
        base = self.resolver.resolve([ucv, f"{cc[-1]}{v}"], vowel_tone)
        first_c, last_c = 0, len(cc) - 1

        # word-initial cluster, longest first
        for i in range(len(cc), 1, -1):
            if self._try_add(units, tone, f"- {''.join(cc[:i])}"):
                first_c = i - 1
                break
        else:
            self._try_add(units, tone, f"- {cc[0]}")

        # longest cluster still reaching the vowel
        for i in range(first_c, len(cc) - 1):
            ccv = self.resolver.resolve([f"{''.join(cc[i:])}{v}"], vowel_tone)
            if ccv is not None:
                base, last_c = ccv, i
                break
            if self.resolver.available(ucv, vowel_tone):
                break

        self._transitions(units, cc, first_c, last_c, tone)
        if base is None:
            base = self._resolve_or_degrade([f"{cc[-1]}{v}"], vowel_tone, v)
        units.append(AliasUnit(base, vowel_tone))
        return units

    def _vcv(self, syllable: Syllable) -> list[AliasUnit]:
        prev, cc, v = syllable.prev_vowel, syllable.cc, syllable.vowel
        tone, vowel_tone = syllable.tone, syllable.vowel_tone
        units: list[AliasUnit] = []
        if self._try_add(units, vowel_tone, f"{prev} {''.join(cc)}{v}"):
            return units

        base = None
        first_c, last_c = 0, len(cc) - 1
        if len(cc) > 1:
            for i in range(len(cc)):
                ccv = self.resolver.resolve([f"{''.join(cc[i:])}{v}"], vowel_tone)
                if ccv is not None:
                    base, last_c = ccv, i
                    break

        # vowel into the cluster, longest first
        for i in range(last_c + 1, 0, -1):
            head = [f"{prev} {''.join(cc[:i])}"]
            if i > 1:
                head.append(f"{prev}{' '.join(cc[:i])}")
            if self._try_add(units, tone, *head):
                first_c = i - 1
                break
        else:
            self._try_add(units, tone, f"{prev} -")

        fused = self._transitions(units, cc, first_c, last_c, tone)
        if base is None:
            candidates = [f"{cc[-1]}{v}"]
            if fused:
                candidates.insert(0, f"_{cc[-1]}{v}")
            base = self._resolve_or_degrade(candidates, vowel_tone, v)
        units.append(AliasUnit(base, vowel_tone))
        return units

    def _transitions(
        self, units: list[AliasUnit], cc: list[str], first_c: int, last_c: int, tone: int
    ) -> bool:
        """Bridge cc[first_c] .. cc[last_c] left to right; True if a fused unit was used."""
        fused = False
        i = first_c
        while i < last_c:
            c1, c2 = cc[i], cc[i + 1]
            if last_c - i > 1:
                span = self._try_add(units, tone, "".join(cc[i:last_c + 1]))
                if span is not None:
                    return True
            pair = self._try_add(units, tone, f"{c1}{c2}", f"{c1} {c2}", f"{c1} {c2}-")
            if pair is not None:
                fused = fused or " " not in pair
                if pair.endswith("-") and self.symbols.is_affricate(c2):
                    # the boundary unit already holds the whole affricate
                    i += 1
            else:
                self._try_add(units, tone, c1, f"{c1} -")
            i += 1
        return fused

    # --- endings ---

    def compile_ending(self, ending: Ending) -> list[AliasUnit]:
        if ending.is_consonants_only:
            return self._consonants_only(ending)
        if ending.is_ending_v:
            units: list[AliasUnit] = []
            self._try_add(units, ending.tone, f"{ending.prev_vowel} -")
            return units
        if ending.is_ending_vc_one:
            return self._ending_vc_one(ending)
        return self._ending_vc_many(ending)

    def _consonants_only(self, ending: Ending) -> list[AliasUnit]:
        return [
            AliasUnit(self._resolve_or_degrade([f"- {c}", f"{c} -"], ending.tone, c), ending.tone)
            for c in ending.cc
        ]

    def _ending_vc_one(self, ending: Ending) -> list[AliasUnit]:
        v, c, tone = ending.prev_vowel, ending.cc[0], ending.tone
        units: list[AliasUnit] = []
        if self._try_add(units, tone, f"{v} {c}-"):
            return units
        head = self._resolve_or_degrade([f"{v} {c}"], tone, c)
        units.append(AliasUnit(head, tone))
        tail = [f"{c} -"] if head == c else [f"{c} -", c]
        self._try_add(units, tone, *tail)
        return units

    def _ending_vc_many(self, ending: Ending) -> list[AliasUnit]:
        v, cc, tone = ending.prev_vowel, ending.cc, ending.tone
        units: list[AliasUnit] = []
        if self._try_add(units, tone, f"{v} {''.join(cc)}-", f"{v}{' '.join(cc)}-"):
            return units

        covered = self._try_add(units, tone, f"{v}{cc[0]} {cc[1]}") is not None
        if not covered:
            head = self._resolve_or_degrade([f"{v} {cc[0]}"], tone, cc[0])
            units.append(AliasUnit(head, tone))

        last = len(cc) - 1
        for i in range(last):
            c1, c2 = cc[i], cc[i + 1]
            if covered and i == 0:
                continue
            if i + 1 == last:
                if self._try_add(units, tone, f"{c1} {c2}-"):
                    break
                found = self._try_add(units, tone, f"{c1}{c2}", f"{c1} {c2}")
            else:
                if self._try_add(units, tone, f"{c1} {''.join(cc[i + 1:])}-"):
                    break
                found = self._try_add(units, tone, f"{c1} {c2}", f"{c1}{c2}")
            if found is None and (i > 0 or self.symbols.is_affricate(c1)):
                # the head unit already ends in cc[0] unless it is an affricate
                self._try_add(units, tone, c1, f"{c1} -")
        else:
            self._try_add(units, tone, f"{cc[-1]} -", cc[-1])
        return units
