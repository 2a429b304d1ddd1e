"""
Pydantic models for the pitch system.

This module provides:
- PitchArrayModel: Validated [letter, alteration, octave] input
- parse_pitch / dump_pitch: None-safe conversion to and from JSON lists
"""

from chuk_mcp_pitch.models.pitch import PitchArrayModel, dump_pitch, parse_pitch

__all__ = [
    "PitchArrayModel",
    "dump_pitch",
    "parse_pitch",
]
