"""
Constants for the pitch system.

No magic numbers - lookup tables and messages live here.
"""

# Semitones above C for each diatonic letter (C D E F G A B)
SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Position on the line of fifths for each natural letter (C=0, G=1, D=2, ...)
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Octaves needed so that 7 * FIFTHS[letter] + 12 * octaves == SEMITONES[letter]
FIFTH_OCTAVES: tuple[int, ...] = (0, -1, -2, 1, 0, -1, -2)

LETTER_COUNT = 7
OCTAVE_SEMITONES = 12


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH = "Invalid pitch array: {value}. Expected [letter, alteration, octave]."
    OCTAVE_REQUIRED = "Pitch {pitch} has no octave. Set one before measuring semitones."
    INVALID_SCALAR = "Invalid scalar: {value}. Expected an integer."
