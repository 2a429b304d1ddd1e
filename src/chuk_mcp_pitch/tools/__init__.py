"""
MCP tool implementations.

Tools are organized by domain:
- octave - Pitch classes, octave setting, interval simplification
- height - Semitone distance and sorting
- arithmetic - Add, subtract, multiply
"""

from chuk_mcp_pitch.tools.arithmetic import register_arithmetic_tools
from chuk_mcp_pitch.tools.height import register_height_tools
from chuk_mcp_pitch.tools.octave import register_octave_tools

__all__ = [
    "register_arithmetic_tools",
    "register_height_tools",
    "register_octave_tools",
]
