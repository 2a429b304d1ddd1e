"""
Pitch arithmetic - transpose, measure, scale and order pitch arrays.

Every function is pure and None-safe: an absent pitch or interval (None)
goes in, None comes out. Octave-less operands (pitch classes) produce
octave-less results.

Functions take any [letter, alteration, octave] sequence and return
PitchArray values.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key, partial
from typing import Any

from chuk_mcp_pitch.constants import LETTER_COUNT, OCTAVE_SEMITONES, SEMITONES

from .fifths import DEFAULT_CODEC, FifthsCodec
from .pitch import PitchArray, octave_of

Pitch = Sequence[int | None]
Comparator = Callable[[Pitch, Pitch], float]


def pitch_class(pitch: Pitch | None) -> PitchArray | None:
    """
    Strip the octave from a pitch.

    pitch_class([1, -2, 3]) -> (1, -2, None)
    """
    if pitch is None:
        return None
    return PitchArray(pitch[0], pitch[1], None)


def set_octave(octave: int | None, pitch: Pitch | None) -> PitchArray | None:
    """
    Return the pitch with the given octave.

    set_octave(2, [1, 2, 0]) -> (1, 2, 2)
    """
    if pitch is None:
        return None
    return PitchArray(pitch[0], pitch[1], octave)


def octave_setter(octave: int | None) -> Callable[[Pitch | None], PitchArray | None]:
    """
    Curried set_octave, for mapping over many pitches.

    list(map(octave_setter(2), pitches))
    """
    return partial(set_octave, octave)


def simplify(interval: Pitch | None) -> PitchArray | None:
    """
    Set the octave of an interval to 0.

    Only the octave changes: simplify([1, 2, 3]) -> (1, 2, 0)
    """
    return set_octave(0, interval)


def set_default_octave(octave: int, pitch: Pitch | None) -> Pitch | None:
    """
    Set the octave only if the pitch has none.

    set_default_octave(1, [1, 2, None]) -> (1, 2, 1)
    set_default_octave(1, [1, 2, 3]) -> [1, 2, 3] (returned unchanged)
    """
    if pitch is None or octave_of(pitch) is not None:
        return pitch
    return PitchArray(pitch[0], pitch[1], octave)


def default_octave_setter(octave: int) -> Callable[[Pitch | None], Pitch | None]:
    """Curried set_default_octave."""
    return partial(set_default_octave, octave)


def semitones(pitch: Pitch | None) -> float | None:
    """
    Distance in semitones from [0, 0, 0] (C0, or a unison).

    semitones([1, 1, 0]) -> 3
    semitones([0, 0, 0]) -> 0

    A pitch class has no height: an unset octave gives nan.
    """
    if pitch is None:
        return None
    octave = octave_of(pitch)
    if octave is None:
        return math.nan
    return SEMITONES[pitch[0] % LETTER_COUNT] + pitch[1] + OCTAVE_SEMITONES * octave


def _height(pitch: Pitch | None) -> float:
    height = semitones(pitch)
    return 0 if height is None else height


def comparator(descending: bool = False) -> Comparator:
    """
    Get a two-argument comparator ordering pitches by height.

    Negative when a sorts before b. Use with functools.cmp_to_key,
    or call sort_pitches directly. A None pitch counts as height 0.
    """
    if descending:
        return lambda a, b: _height(b) - _height(a)
    return lambda a, b: _height(a) - _height(b)


def sort_pitches(pitches: Iterable[Pitch], descending: bool = False) -> list[Pitch]:
    """Sort pitches by height (lowest first unless descending)."""
    return sorted(pitches, key=cmp_to_key(comparator(descending)))


def add(a: Pitch | None, b: Pitch | None, *, codec: FifthsCodec = DEFAULT_CODEC) -> PitchArray | None:
    """
    Add two pitches or intervals. Transposes a pitch by an interval.

    add([3, 0, 0], [4, 0, 0]) -> (0, 0, 1)  # P4 + P5 = P8
    """
    if a is None or b is None:
        return None
    fifths_a, octaves_a = codec.to_fifths(a)
    fifths_b, octaves_b = codec.to_fifths(b)
    octaves = None if octaves_a is None or octaves_b is None else octaves_a + octaves_b
    return codec.to_pitch((fifths_a + fifths_b, octaves))


def subtract(
    a: Pitch | None, b: Pitch | None, *, codec: FifthsCodec = DEFAULT_CODEC
) -> PitchArray | None:
    """
    Interval from a to b (b - a).

    subtract([3, 0, 0], [4, 0, 0]) -> (1, 0, 0)  # F to G is a M2
    add(a, subtract(a, b)) == b
    """
    if a is None or b is None:
        return None
    fifths_a, octaves_a = codec.to_fifths(a)
    fifths_b, octaves_b = codec.to_fifths(b)
    octaves = None if octaves_a is None or octaves_b is None else octaves_b - octaves_a
    return codec.to_pitch((fifths_b - fifths_a, octaves))


def _coerce_scalar(scalar: Any) -> float:
    if scalar is None or (isinstance(scalar, str) and not scalar.strip()):
        return 0
    try:
        value = float(scalar)
    except (TypeError, ValueError):
        return math.nan
    return int(value) if math.isfinite(value) else value


def multiply(
    scalar: float | str | None, a: Pitch | None, *, codec: FifthsCodec = DEFAULT_CODEC
) -> PitchArray | None:
    """
    Multiply a pitch or interval by a scalar.

    multiply(2, [4, 0, 0]) -> (1, 0, 1)  # two fifths = M9

    The scalar is coerced like a number: "2" is 2, "2.5" truncates to 2,
    None and "" are 0.
    """
    if a is None:
        return None
    m = _coerce_scalar(scalar)
    fifths, octaves = codec.to_fifths(a)
    return codec.to_pitch((m * fifths, None if octaves is None else m * octaves))
