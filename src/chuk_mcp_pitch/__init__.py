"""
Pitch arithmetic over [letter, alteration, octave] arrays.

    >>> from chuk_mcp_pitch import add, subtract, multiply
    >>> add([3, 0, 0], [4, 0, 0])
    PitchArray(0, 0, 1)
    >>> subtract([3, 0, 0], [4, 0, 0])
    PitchArray(1, 0, 0)
    >>> multiply(2, [4, 0, 0])
    PitchArray(1, 0, 1)
"""

from chuk_mcp_pitch.core import (
    DEFAULT_CODEC,
    FifthsCodec,
    LineOfFifths,
    PitchArray,
    add,
    comparator,
    default_octave_setter,
    multiply,
    octave_setter,
    pitch_class,
    semitones,
    set_default_octave,
    set_octave,
    simplify,
    sort_pitches,
    subtract,
    to_fifths,
    to_pitch,
)

__all__ = [
    "PitchArray",
    "FifthsCodec",
    "LineOfFifths",
    "DEFAULT_CODEC",
    "to_fifths",
    "to_pitch",
    "pitch_class",
    "set_octave",
    "octave_setter",
    "simplify",
    "set_default_octave",
    "default_octave_setter",
    "semitones",
    "comparator",
    "sort_pitches",
    "add",
    "subtract",
    "multiply",
]
