"""
Tests for fifths space (fifths.py).

The codec is the one piece of real encoding logic: arithmetic is only as
correct as this round trip.
"""

from collections.abc import Sequence

import pytest

from chuk_mcp_pitch import DEFAULT_CODEC, LineOfFifths, PitchArray, add, multiply, semitones, subtract
from chuk_mcp_pitch.core import FifthsVector, to_fifths, to_pitch


class TestLineOfFifths:
    """Tests for the standard codec."""

    @pytest.mark.parametrize(
        ("letter", "fifths"),
        [(0, 0), (1, 2), (2, 4), (3, -1), (4, 1), (5, 3), (6, 5)],
    )
    def test_natural_letters(self, letter: int, fifths: int) -> None:
        """Natural letters sit on the line of fifths F C G D A E B."""
        assert to_fifths((letter, 0, None)) == (fifths, None)

    def test_sharp_adds_seven_fifths(self) -> None:
        """F# is seven fifths above F."""
        assert to_fifths((3, 1, None))[0] == to_fifths((3, 0, None))[0] + 7

    def test_flat_subtracts_seven_fifths(self) -> None:
        """Bb is seven fifths below B."""
        assert to_fifths((6, -1, None))[0] == 5 - 7

    def test_height_preserved(self, sample_pitches: list[PitchArray]) -> None:
        """7 * fifths + 12 * octaves is the semitone height."""
        for p in sample_pitches:
            fifths, octaves = to_fifths(p)
            assert 7 * fifths + 12 * octaves == semitones(p)  # type: ignore[operator]

    def test_round_trip(self, sample_pitches: list[PitchArray]) -> None:
        """Decoding an encoded pitch gives it back."""
        for p in sample_pitches:
            assert to_pitch(to_fifths(p)) == p

    def test_round_trip_pitch_class(self) -> None:
        """Pitch classes round trip with the octave unset."""
        assert to_fifths((5, 1, None)) == (10, None)
        assert to_pitch((10, None)) == (5, 1, None)

    def test_decode_returns_pitch_array(self) -> None:
        """Decoding produces PitchArray values."""
        result = to_pitch((1, 0))
        assert isinstance(result, PitchArray)
        assert result == (4, 0, 0)

    def test_decode_double_flat(self) -> None:
        """Far down the line of fifths gives double flats."""
        assert to_pitch((-10, 5)) == (2, -2, -1)

    def test_short_array(self) -> None:
        """A two-item array encodes as a pitch class."""
        assert to_fifths([1, 0]) == (2, None)

    def test_list_input(self) -> None:
        """Lists encode the same as tuples."""
        assert to_fifths([4, 0, 0]) == to_fifths((4, 0, 0))

    def test_default_codec(self) -> None:
        """The module default is a LineOfFifths."""
        assert isinstance(DEFAULT_CODEC, LineOfFifths)


class StepCodec:
    """Stub codec: fifths is the letter, octaves is the octave."""

    def to_fifths(self, pitch: Sequence[int | None]) -> FifthsVector:
        return (pitch[0], pitch[2])  # type: ignore[return-value]

    def to_pitch(self, vector: FifthsVector) -> PitchArray:
        return PitchArray(vector[0], 0, vector[1])


class TestInjectedCodec:
    """Arithmetic delegates all encoding to the codec."""

    def test_add_uses_codec(self) -> None:
        """add sums in whatever space the codec defines."""
        assert add((1, 0, 2), (3, 0, 5), codec=StepCodec()) == (4, 0, 7)

    def test_subtract_uses_codec(self) -> None:
        """subtract is b - a in codec space."""
        assert subtract((1, 0, 2), (3, 0, 5), codec=StepCodec()) == (2, 0, 3)

    def test_multiply_uses_codec(self) -> None:
        """multiply scales in codec space."""
        assert multiply(3, (2, 0, 1), codec=StepCodec()) == (6, 0, 3)

    def test_octave_propagation_is_not_codec_specific(self) -> None:
        """Unset octaves propagate regardless of codec."""
        assert add((1, 0, None), (3, 0, 5), codec=StepCodec()) == (4, 0, None)
        assert subtract((1, 0, 2), (3, 0, None), codec=StepCodec()) == (2, 0, None)
