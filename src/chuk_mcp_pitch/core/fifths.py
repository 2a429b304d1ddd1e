"""
Fifths space - a linear encoding of pitch arrays.

Pitch arrays are easy to read but awkward to add: letters wrap at 7 and
octaves carry. In fifths space a pitch is a vector (fifths, octaves) on the
line of fifths, so transposition is plain vector addition:

    semitones = 7 * fifths + 12 * octaves

Arithmetic converts to fifths space, does the math, and converts back.
A None octave stays None in both directions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chuk_mcp_pitch.constants import FIFTH_OCTAVES, FIFTHS, LETTER_COUNT

from .pitch import PitchArray, octave_of

# (fifths, octaves); octaves is None for pitch classes
FifthsVector = tuple[int, int | None]


class FifthsCodec(Protocol):
    """Converts between pitch arrays and fifths vectors."""

    def to_fifths(self, pitch: Sequence[int | None]) -> FifthsVector: ...

    def to_pitch(self, vector: FifthsVector) -> PitchArray: ...


class LineOfFifths:
    """
    The standard codec.

    C=0, G=1, D=2, A=3, E=4, B=5, F=-1. Each sharp adds 7 fifths
    (and removes 4 octaves to stay at the same height); each flat
    subtracts them.
    """

    def to_fifths(self, pitch: Sequence[int | None]) -> FifthsVector:
        """Encode [letter, alteration, octave] as (fifths, octaves)."""
        letter = pitch[0] % LETTER_COUNT
        alteration = pitch[1]
        octave = octave_of(pitch)
        fifths = FIFTHS[letter] + 7 * alteration
        if octave is None:
            return (fifths, None)
        return (fifths, octave - 4 * alteration + FIFTH_OCTAVES[letter])

    def to_pitch(self, vector: FifthsVector) -> PitchArray:
        """Decode (fifths, octaves) back to a pitch array."""
        fifths, octaves = vector
        letter = (4 * fifths) % LETTER_COUNT
        alteration = (fifths + 1) // LETTER_COUNT
        if octaves is None:
            return PitchArray(letter, alteration, None)
        return PitchArray(letter, alteration, octaves + 4 * alteration - FIFTH_OCTAVES[letter])


DEFAULT_CODEC: FifthsCodec = LineOfFifths()


def to_fifths(pitch: Sequence[int | None]) -> FifthsVector:
    """Encode with the default codec."""
    return DEFAULT_CODEC.to_fifths(pitch)


def to_pitch(vector: FifthsVector) -> PitchArray:
    """Decode with the default codec."""
    return DEFAULT_CODEC.to_pitch(vector)
