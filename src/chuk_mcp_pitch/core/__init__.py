"""
Core pitch primitives - the Radix layer.

These are the pure building blocks everything else composes on:
- PitchArray: [letter, alteration, octave], for pitches and intervals
- FifthsCodec / LineOfFifths: the linear (fifths, octaves) encoding
- ops: None-safe arithmetic (add, subtract, multiply) and helpers
"""

from chuk_mcp_pitch.core.fifths import (
    DEFAULT_CODEC,
    FifthsCodec,
    FifthsVector,
    LineOfFifths,
    to_fifths,
    to_pitch,
)
from chuk_mcp_pitch.core.ops import (
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
)
from chuk_mcp_pitch.core.pitch import PitchArray

__all__ = [
    # Types
    "PitchArray",
    # Fifths space
    "FifthsCodec",
    "FifthsVector",
    "LineOfFifths",
    "DEFAULT_CODEC",
    "to_fifths",
    "to_pitch",
    # Octave helpers
    "pitch_class",
    "set_octave",
    "octave_setter",
    "simplify",
    "set_default_octave",
    "default_octave_setter",
    # Height
    "semitones",
    "comparator",
    "sort_pitches",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
]
