"""
Arithmetic tools - MCP tools for transposing and measuring distances.

Tools for adding, subtracting, and multiplying pitches and intervals.
Null arguments give a null result rather than an error.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core import add, multiply, subtract
from chuk_mcp_pitch.models import dump_pitch, parse_pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_arithmetic_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register arithmetic tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_add(a: list[int | None] | None, b: list[int | None] | None) -> str:
        """
        Add two pitches or intervals. Use it to transpose a pitch.

        Args:
            a: Pitch or interval array [letter, alteration, octave]
            b: Pitch or interval array [letter, alteration, octave]

        Returns:
            JSON string with the sum

        Example:
            pitch_add(a=[3, 0, 0], b=[4, 0, 0])  # P4 + P5 -> [0, 0, 1]
        """
        try:
            result = add(parse_pitch(a), parse_pitch(b))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to add pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_add"] = pitch_add

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_subtract(a: list[int | None] | None, b: list[int | None] | None) -> str:
        """
        Get the interval from a to b.

        Args:
            a: Starting pitch or interval
            b: Target pitch or interval

        Returns:
            JSON string with the interval b - a

        Example:
            pitch_subtract(a=[3, 0, 0], b=[4, 0, 0])  # F0 -> G0 is [1, 0, 0]
        """
        try:
            result = subtract(parse_pitch(a), parse_pitch(b))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to subtract pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_subtract"] = pitch_subtract

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_multiply(scalar: int, a: list[int | None] | None) -> str:
        """
        Multiply a pitch or interval by a scalar.

        Args:
            scalar: Integer factor
            a: Pitch or interval array [letter, alteration, octave]

        Returns:
            JSON string with the product

        Example:
            pitch_multiply(scalar=2, a=[4, 0, 0])  # two fifths -> [1, 0, 1]
        """
        try:
            if isinstance(scalar, bool) or not isinstance(scalar, int):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_SCALAR.format(value=scalar)}
                )
            result = multiply(scalar, parse_pitch(a))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to multiply pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_multiply"] = pitch_multiply

    return tools
