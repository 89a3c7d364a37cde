"""Musical notes and octaves for labelling frequency axes."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol


PITCH_CLASSES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

OCTAVE_MINUS_1 = -1
OCTAVE_0 = 0
OCTAVE_1 = 1
OCTAVE_2 = 2
OCTAVE_3 = 3
OCTAVE_4 = 4
OCTAVE_5 = 5
OCTAVE_6 = 6
OCTAVE_7 = 7
OCTAVE_8 = 8
OCTAVE_9 = 9

# Octaves drawn on a frequency axis, low to high.
AXIS_OCTAVES = (OCTAVE_0, OCTAVE_1, OCTAVE_2, OCTAVE_3, OCTAVE_4, OCTAVE_5, OCTAVE_6, OCTAVE_7, OCTAVE_8, OCTAVE_9)

MAX_MIDI_NUMBER = 127
A4_MIDI_NUMBER = 69
# Half a semitone: a note owns the band between the quarter tones around it.
QUARTER_TONE = 2.0 ** (1.0 / 24.0)

_NOTE_NAME = re.compile(r"^([A-G]#?)(-?\d+)$")


@dataclass(frozen=True)
class Note:
    pitch_class: str
    octave: int
    midi_number: int
    exact_frequency: float

    @property
    def name(self) -> str:
        return f"{self.pitch_class}{self.octave}"

    @property
    def is_altered(self) -> bool:
        return "#" in self.pitch_class

    @property
    def lower_frequency(self) -> float:
        return self.exact_frequency / QUARTER_TONE

    @property
    def upper_frequency(self) -> float:
        return self.exact_frequency * QUARTER_TONE

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Octave:
    """Notes from C upward; `base_frequency` is the exact frequency of the octave's C."""

    index: int
    base_frequency: float
    notes: tuple[Note, ...]

    @property
    def name(self) -> str:
        return f"Octave{self.index}"

    @property
    def lower_frequency(self) -> float:
        return self.base_frequency / QUARTER_TONE

    @property
    def upper_frequency(self) -> float:
        return 2.0 * self.base_frequency / QUARTER_TONE

    def note(self, pitch_class: str) -> Note:
        for n in self.notes:
            if n.pitch_class == pitch_class:
                return n
        raise KeyError(f"{pitch_class} is not part of {self.name}")


class Temperament(Protocol):
    def octave(self, index: int) -> Octave:
        ...


@dataclass(frozen=True)
class EqualTemperament:
    """Twelve-tone equal temperament tuned to `a4` Hz."""

    a4: float = 440.0

    def __post_init__(self) -> None:
        if self.a4 <= 0:
            raise ValueError("a4 reference pitch must be > 0")

    def frequency(self, midi_number: int) -> float:
        return self.a4 * 2.0 ** ((midi_number - A4_MIDI_NUMBER) / 12.0)

    def note(self, pitch_class: str, octave: int) -> Note:
        if pitch_class not in PITCH_CLASSES:
            raise ValueError(f"unknown pitch class: {pitch_class}")
        midi_number = 12 * (octave + 1) + PITCH_CLASSES.index(pitch_class)
        if midi_number < 0 or midi_number > MAX_MIDI_NUMBER:
            raise ValueError(f"{pitch_class}{octave} is outside the MIDI note range")
        return Note(
            pitch_class=pitch_class,
            octave=octave,
            midi_number=midi_number,
            exact_frequency=self.frequency(midi_number),
        )

    def note_named(self, name: str) -> Note:
        """Parse names like `A4`, `C#3` or `G-1`."""
        match = _NOTE_NAME.match(name.strip())
        if match is None:
            raise ValueError(f"invalid note name: {name!r}")
        return self.note(match.group(1), int(match.group(2)))

    def octave(self, index: int) -> Octave:
        if index < OCTAVE_MINUS_1 or index > OCTAVE_9:
            raise ValueError(f"octave index out of range: {index}")
        base_midi = 12 * (index + 1)
        notes = []
        for offset, pitch_class in enumerate(PITCH_CLASSES):
            if base_midi + offset > MAX_MIDI_NUMBER:
                break
            notes.append(self.note(pitch_class, index))
        return Octave(index=index, base_frequency=self.frequency(base_midi), notes=tuple(notes))
