"""
Pitch arrays - the compact encoding everything else operates on.

A pitch array is [letter, alteration, octave]:
- letter: diatonic step 0-6 (C D E F G A B, or unison..seventh for intervals)
- alteration: accidentals, -1 = flat, +1 = sharp
- octave: octave number, or None for a pitch class / octave-less interval

The same shape is used for pitches and intervals. [4, 0, 0] is G0 as a
pitch and a perfect fifth as an interval.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple


class PitchArray(NamedTuple):
    """
    An immutable pitch or interval.

    Compares equal to a plain tuple with the same values, so
    PitchArray(0, 0, 1) == (0, 0, 1).
    """

    letter: int
    alteration: int = 0
    octave: int | None = None

    @property
    def is_pitch_class(self) -> bool:
        """True when the octave is unset."""
        return self.octave is None

    def __repr__(self) -> str:
        return f"PitchArray({self.letter}, {self.alteration}, {self.octave})"


def octave_of(pitch: Sequence[int | None]) -> int | None:
    """Octave slot of a pitch. Short arrays like [1, 0] have none."""
    return pitch[2] if len(pitch) > 2 else None


# Named intervals (diatonic, within the first octave)
UNISON = PitchArray(0, 0, 0)
MAJOR_SECOND = PitchArray(1, 0, 0)
MAJOR_THIRD = PitchArray(2, 0, 0)
PERFECT_FOURTH = PitchArray(3, 0, 0)
PERFECT_FIFTH = PitchArray(4, 0, 0)
MAJOR_SIXTH = PitchArray(5, 0, 0)
MAJOR_SEVENTH = PitchArray(6, 0, 0)
OCTAVE = PitchArray(0, 0, 1)

# Short aliases
P1 = UNISON
M2 = MAJOR_SECOND
M3 = MAJOR_THIRD
P4 = PERFECT_FOURTH
P5 = PERFECT_FIFTH
M6 = MAJOR_SIXTH
M7 = MAJOR_SEVENTH
P8 = OCTAVE
