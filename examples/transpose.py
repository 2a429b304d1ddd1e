#!/usr/bin/env python3
"""
Example: Transpose, measure and sort pitch arrays.

This demonstrates the arithmetic core without the MCP server.

Usage:
    python examples/transpose.py
"""

from chuk_mcp_pitch import (
    add,
    default_octave_setter,
    multiply,
    octave_setter,
    semitones,
    sort_pitches,
    subtract,
)
from chuk_mcp_pitch.core.pitch import MAJOR_THIRD, PERFECT_FIFTH, PitchArray

# C major triad as pitch classes
TRIAD = [PitchArray(0, 0), PitchArray(2, 0), PitchArray(4, 0)]


def main() -> None:
    """Run the examples."""
    # Example 1: Place the triad in octave 4, then transpose it up a fifth
    print("C major triad in octave 4:")
    voiced = list(map(octave_setter(4), TRIAD))
    for pitch in voiced:
        print(f"  {pitch}  ({semitones(pitch)} semitones)")

    print("\nTransposed up a perfect fifth:")
    for pitch in voiced:
        print(f"  {add(pitch, PERFECT_FIFTH)}")

    # Example 2: Intervals between consecutive notes
    print("\nIntervals between notes:")
    for low, high in zip(voiced, voiced[1:], strict=False):
        print(f"  {low} -> {high}: {subtract(low, high)}")

    # Example 3: Stacking intervals
    print("\nThree major thirds:")
    print(f"  {multiply(3, MAJOR_THIRD)}")

    # Example 4: Default octaves and sorting
    mixed = [PitchArray(4, 0, 3), PitchArray(0, 0), PitchArray(5, -1, 2)]
    print("\nSorted with default octave 4:")
    for pitch in sort_pitches(map(default_octave_setter(4), mixed)):
        print(f"  {pitch}")


if __name__ == "__main__":
    main()
