"""Read-only view of the aliases a voicebank was recorded with."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable

import yaml

MIN_TONE = 0
MAX_TONE = 127


class VoicebankCatalog:
    """Alias -> inclusive tone ranges.

    Built once and never mutated, so one catalog can be shared across
    threads phonemizing different tracks.
    """

    def __init__(self, ranges: dict[str, list[tuple[int, int]]]):
        self._ranges = MappingProxyType(
            {alias: tuple(sorted(r)) for alias, r in ranges.items()}
        )

    def __len__(self) -> int:
        return len(self._ranges)

    def __contains__(self, alias: str) -> bool:
        return alias in self._ranges

    @property
    def aliases(self) -> list[str]:
        return sorted(self._ranges)

    def lookup(self, alias: str, tone: int) -> bool:
        """True iff alias is recorded for a range containing tone."""
        return any(low <= tone <= high for low, high in self._ranges.get(alias, ()))

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, int, int]]) -> VoicebankCatalog:
        ranges: dict[str, list[tuple[int, int]]] = {}
        for alias, low, high in entries:
            if low > high:
                raise ValueError(f"Invalid tone range {low}-{high} for alias {alias!r}")
            ranges.setdefault(alias, []).append((int(low), int(high)))
        return cls(ranges)

    @classmethod
    def from_aliases(
        cls, aliases: Iterable[str], low: int = MIN_TONE, high: int = MAX_TONE
    ) -> VoicebankCatalog:
        """Catalog where every alias is valid over the same range."""
        return cls.from_entries((alias, low, high) for alias in aliases)

    @classmethod
    def from_yaml(cls, path: Path) -> VoicebankCatalog:
        """Load a catalog listing.

        Accepts either a plain list of alias strings, or a list of
        ``{alias, tones: [low, high]}`` mappings.

        Raises:
            ValueError: on malformed entries.
        """
        data = yaml.safe_load(Path(path).read_text(encoding="utf8")) or []
        if isinstance(data, dict):
            data = data.get("aliases") or []
        if not isinstance(data, list):
            raise ValueError(f"Invalid catalog format at {path}.")
        entries = []
        for item in data:
            if isinstance(item, str):
                entries.append((item, MIN_TONE, MAX_TONE))
            elif isinstance(item, dict) and item.get("alias") is not None:
                tones = item.get("tones") or [MIN_TONE, MAX_TONE]
                if len(tones) != 2:
                    raise ValueError(f"Catalog entry {item!r} needs tones: [low, high]")
                entries.append((str(item["alias"]), int(tones[0]), int(tones[1])))
            else:
                raise ValueError(f"Invalid catalog entry {item!r} in {path}.")
        return cls.from_entries(entries)
