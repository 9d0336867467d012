"""Core data types for deltaphon."""

from dataclasses import dataclass, field


class ConfigurationError(ValueError):
    """A language or settings definition is inconsistent."""


class UnknownWordError(KeyError):
    """No dictionary recognizes a word and no phonetic hint was given."""


@dataclass
class Note:
    """A sung note as handed over by the song model."""
    lyric: str
    tone: int                # MIDI semitone index
    position: float          # ms from song start
    duration: float          # ms
    phonetic_hint: str | None = None   # space separated symbols, overrides G2P

    @property
    def end(self) -> float:
        return self.position + self.duration

    @property
    def is_extension(self) -> bool:
        """True for '+' notes that continue the previous vowel."""
        return self.lyric.startswith("+")


@dataclass
class Syllable:
    """Onset cluster plus nucleus, with the vowel that precedes it.

    ``tone`` is the pitch the transition into the syllable is sung at
    (the previous vowel's tone when there is one), ``vowel_tone`` the
    pitch of the nucleus itself.
    """
    prev_vowel: str | None
    cc: list[str]
    vowel: str
    tone: int
    vowel_tone: int
    note_index: int = 0

    @property
    def is_starting_v(self) -> bool:
        return self.prev_vowel is None and not self.cc

    @property
    def is_vv(self) -> bool:
        return self.prev_vowel is not None and not self.cc

    @property
    def is_starting_cv_one(self) -> bool:
        return self.prev_vowel is None and len(self.cc) == 1

    @property
    def is_starting_cv_many(self) -> bool:
        return self.prev_vowel is None and len(self.cc) > 1

    @property
    def is_vcv_one(self) -> bool:
        return self.prev_vowel is not None and len(self.cc) == 1

    @property
    def is_vcv_many(self) -> bool:
        return self.prev_vowel is not None and len(self.cc) > 1


@dataclass
class Ending:
    """Coda cluster after the last vowel of a phrase."""
    prev_vowel: str | None
    cc: list[str]
    tone: int
    note_index: int = 0

    @property
    def is_ending_v(self) -> bool:
        return self.prev_vowel is not None and not self.cc

    @property
    def is_ending_vc_one(self) -> bool:
        return self.prev_vowel is not None and len(self.cc) == 1

    @property
    def is_ending_vc_many(self) -> bool:
        return self.prev_vowel is not None and len(self.cc) > 1

    @property
    def is_consonants_only(self) -> bool:
        return self.prev_vowel is None


@dataclass(frozen=True)
class AliasUnit:
    """One alias to request from the voicebank."""
    alias: str
    tone: int
    transition_ms: float = 0.0


@dataclass
class PhonemizedNote:
    """Output of the phonemizer for one note."""
    note_index: int
    note: Note
    units: list[AliasUnit] = field(default_factory=list)

    @property
    def aliases(self) -> list[str]:
        return [u.alias for u in self.units]

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "index": self.note_index,
            "lyric": self.note.lyric,
            "tone": self.note.tone,
            "position": round(self.note.position, 3),
            "duration": round(self.note.duration, 3),
            "units": [
                {
                    "alias": u.alias,
                    "tone": u.tone,
                    "transition_ms": round(u.transition_ms, 3),
                }
                for u in self.units
            ],
        }
