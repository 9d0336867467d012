"""CMUdict/neural ARPABET fallback built on g2p_en."""

import logging
import re
from pathlib import Path

from g2p_en import G2p

from deltaphon.cache import get_cached_g2p, store_g2p_cache
from deltaphon.g2p.dictionary import normalize_grapheme

logger = logging.getLogger(__name__)

_g2p = None


def _get_g2p() -> G2p:
    """Lazy-init g2p_en (loads CMUdict and the model on first use)."""
    global _g2p
    if _g2p is None:
        try:
            _g2p = G2p()
        except LookupError as exc:
            raise RuntimeError(
                "g2p_en requires the NLTK cmudict corpus. "
                "Install it with: python -m nltk.downloader cmudict"
            ) from exc
    return _g2p


def strip_stress(phoneme: str) -> str:
    """'AH0' -> 'ah'."""
    return re.sub(r"[0-9]", "", phoneme).lower()


class ArpabetG2p:
    """Generic fallback: knows (or guesses) every alphabetic word.

    Returns lowercase, stress-free ARPABET; predictions are stored in the
    file cache so the model only runs once per word.
    """

    def __init__(self, use_cache: bool = True, cache_dir: Path | None = None):
        self.use_cache = use_cache
        self.cache_dir = cache_dir

    def query(self, word: str) -> list[str] | None:
        cleaned = normalize_grapheme(word)
        if not cleaned.strip("'"):
            return None

        if self.use_cache:
            cached = get_cached_g2p(cleaned, self.cache_dir)
            if cached is not None:
                return cached

        raw = _get_g2p()(cleaned)
        phonemes = [strip_stress(p) for p in raw if p.strip() and re.search(r"[A-Za-z]", p)]
        if not phonemes:
            logger.debug(f"g2p_en produced nothing for {word!r}")
            return None

        if self.use_cache:
            try:
                store_g2p_cache(cleaned, phonemes, self.cache_dir)
            except OSError as exc:
                logger.warning(f"Could not cache g2p result for {cleaned!r}: {exc}")
        return phonemes
