"""
Pitch model - validated pitch arrays from untrusted input.

The core trusts its input. Anything arriving from outside (MCP tool
arguments, JSON) goes through PitchArrayModel first.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core.pitch import PitchArray


class PitchArrayModel(BaseModel):
    """
    A pitch or interval as [letter, alteration, octave].

    Accepts the list form directly:
        PitchArrayModel.model_validate([4, 0, 0])
        PitchArrayModel.model_validate([4, 1])  # pitch class, octave unset
    """

    letter: int = Field(..., ge=0, le=6, description="Diatonic step (0=C/unison .. 6=B/seventh)")
    alteration: int = Field(0, description="Accidentals: -1 = flat, +1 = sharp")
    octave: int | None = Field(None, description="Octave, or null for a pitch class")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def from_sequence(cls, data: Any) -> Any:
        """Map a 2- or 3-item list onto the named fields."""
        if isinstance(data, (list, tuple)):
            if not 2 <= len(data) <= 3:
                raise ValueError(ErrorMessages.INVALID_PITCH.format(value=list(data)))
            keys = ("letter", "alteration", "octave")
            return dict(zip(keys, data, strict=False))
        return data

    @classmethod
    def from_pitch(cls, pitch: Sequence[int | None]) -> PitchArrayModel:
        """Build from any pitch sequence."""
        return cls.model_validate(list(pitch))

    def to_pitch(self) -> PitchArray:
        """Convert to the core PitchArray."""
        return PitchArray(self.letter, self.alteration, self.octave)

    def to_list(self) -> list[int | None]:
        """Convert to the JSON list form."""
        return [self.letter, self.alteration, self.octave]


def parse_pitch(value: Sequence[int | None] | None) -> PitchArray | None:
    """Validate an optional list argument. None stays None."""
    if value is None:
        return None
    return PitchArrayModel.model_validate(value).to_pitch()


def dump_pitch(pitch: Sequence[int | None] | None) -> list[int | None] | None:
    """JSON form of an optional pitch."""
    if pitch is None:
        return None
    return list(pitch)
