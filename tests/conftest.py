"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_pitch import PitchArray


@pytest.fixture
def middle_c() -> PitchArray:
    """C4."""
    return PitchArray(0, 0, 4)


@pytest.fixture
def sample_pitches() -> list[PitchArray]:
    """A few pitches across octaves, with accidentals."""
    return [
        PitchArray(0, 0, 0),  # C0
        PitchArray(3, 1, 4),  # F#4
        PitchArray(6, -1, 2),  # Bb2
        PitchArray(2, -2, -1),  # Ebb-1
        PitchArray(5, 0, 3),  # A3
    ]
