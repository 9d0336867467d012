"""YAML word dictionaries and the fallback chain that queries them."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping, Protocol, Sequence

import yaml

logger = logging.getLogger(__name__)


class G2p(Protocol):
    def query(self, word: str) -> list[str] | None: ...


def normalize_grapheme(value: str) -> str:
    """Lowercase and strip everything but letters and apostrophes."""
    return re.sub(r"[^A-Za-z']+", "", value).lower()


class G2pDictionary:
    """Exact word -> phoneme lookup."""

    def __init__(self, entries: Mapping[str, Sequence[str]], name: str = "dictionary"):
        self.name = name
        self._entries: dict[str, tuple[str, ...]] = {}
        for grapheme, phonemes in entries.items():
            key = normalize_grapheme(grapheme)
            if key and key not in self._entries:
                self._entries[key] = tuple(str(p) for p in phonemes)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: str) -> bool:
        return normalize_grapheme(word) in self._entries

    def query(self, word: str) -> list[str] | None:
        phonemes = self._entries.get(normalize_grapheme(word))
        return list(phonemes) if phonemes is not None else None

    @classmethod
    def from_yaml(cls, text: str, name: str = "dictionary") -> G2pDictionary:
        """Parse an OpenUtau-style dictionary (``entries: [{grapheme, phonemes}]``).

        Raises:
            ValueError: if the document is not a mapping.
        """
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid dictionary format in {name}.")
        entries: dict[str, list[str]] = {}
        for entry in data.get("entries") or []:
            if not isinstance(entry, dict):
                continue
            grapheme = entry.get("grapheme")
            phonemes = entry.get("phonemes")
            if not grapheme or not phonemes:
                continue
            entries.setdefault(str(grapheme), [str(p) for p in phonemes])
        return cls(entries, name=name)

    @classmethod
    def from_file(cls, path: Path) -> G2pDictionary:
        return cls.from_yaml(Path(path).read_text(encoding="utf8"), name=str(path))


class G2pFallbacks:
    """Query each G2P in order; the first one that knows the word wins."""

    def __init__(self, g2ps: Iterable[G2p]):
        self.g2ps = tuple(g2ps)

    def query(self, word: str) -> list[str] | None:
        for g2p in self.g2ps:
            phonemes = g2p.query(word)
            if phonemes:
                return phonemes
        return None


class G2pResolver:
    """Fallback chain plus the language's symbol replacement table."""

    def __init__(self, g2p: G2p, replacements: Mapping[str, str] | None = None):
        self.g2p = g2p
        self.replacements = dict(replacements or {})

    def resolve(self, word: str) -> list[str] | None:
        phonemes = self.g2p.query(word)
        if phonemes is None:
            return None
        return [self.replacements.get(p, p) for p in phonemes]
