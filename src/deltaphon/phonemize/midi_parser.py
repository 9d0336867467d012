"""Read a sung melody (notes plus lyric events) from a MIDI file."""
from dataclasses import dataclass
from pathlib import Path

import pretty_midi

from deltaphon.types import Note

# lyric events this close to a note onset belong to that note
_LYRIC_TOLERANCE = 0.02  # seconds


@dataclass
class MidiTrack:
    """Parsed vocal track."""
    notes: list[Note]
    tempo: float
    total_duration: float


def _clean_lyric(text: str) -> str:
    # syllable continuation marks used by some editors
    return text.strip().rstrip("-").strip()


def parse_midi(path: Path) -> MidiTrack:
    """Parse a MIDI file into notes carrying their lyrics.

    Notes from every non-drum instrument are merged and sorted by start.
    A note without a lyric event at its onset becomes an extension note
    ("+"), continuing the previous vowel.
    """
    mid = pretty_midi.PrettyMIDI(str(path))

    try:
        tempo = mid.estimate_tempo()
    except ValueError:
        # estimate_tempo fails with fewer than two notes; fall back to
        # the tempo embedded in the MIDI file's tempo-change map.
        tempo_changes = mid.get_tempo_changes()
        tempo = tempo_changes[1][0] if len(tempo_changes[1]) > 0 else 120.0

    raw = []
    for inst in mid.instruments:
        if inst.is_drum:
            continue
        raw.extend(inst.notes)
    raw.sort(key=lambda n: (n.start, n.pitch))

    lyrics = sorted(mid.lyrics, key=lambda lyr: lyr.time)
    notes = []
    li = 0
    for n in raw:
        # skip lyric events that belong to nothing
        while li < len(lyrics) and lyrics[li].time < n.start - _LYRIC_TOLERANCE:
            li += 1
        lyric = "+"
        if li < len(lyrics) and abs(lyrics[li].time - n.start) <= _LYRIC_TOLERANCE:
            lyric = _clean_lyric(lyrics[li].text) or "+"
            li += 1
        notes.append(Note(
            lyric=lyric,
            tone=n.pitch,
            position=round(n.start * 1000, 3),
            duration=round((n.end - n.start) * 1000, 3),
        ))

    return MidiTrack(
        notes=notes,
        tempo=round(tempo),
        total_duration=mid.get_end_time(),
    )
