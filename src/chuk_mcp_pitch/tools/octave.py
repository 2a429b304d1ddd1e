"""
Octave tools - MCP tools for reading and changing the octave slot.

Tools for pitch classes, setting octaves, and simplifying intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.core import pitch_class, set_default_octave, set_octave, simplify
from chuk_mcp_pitch.models import dump_pitch, parse_pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_octave_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register octave tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_class_of(pitch: list[int | None] | None) -> str:
        """
        Strip the octave from a pitch.

        Args:
            pitch: Pitch array [letter, alteration, octave]

        Returns:
            JSON string with the pitch class (octave null)

        Example:
            pitch_class_of(pitch=[1, -2, 3])  # -> [1, -2, null]
        """
        try:
            result = pitch_class(parse_pitch(pitch))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to get pitch class")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_class_of"] = pitch_class_of

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_set_octave(octave: int | None, pitch: list[int | None] | None) -> str:
        """
        Set the octave of a pitch.

        Args:
            octave: Octave to set (null makes a pitch class)
            pitch: Pitch array [letter, alteration, octave]

        Returns:
            JSON string with the updated pitch

        Example:
            pitch_set_octave(octave=2, pitch=[1, 2, 0])  # -> [1, 2, 2]
        """
        try:
            result = set_octave(octave, parse_pitch(pitch))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to set octave")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_set_octave"] = pitch_set_octave

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_simplify(interval: list[int | None] | None) -> str:
        """
        Simplify an interval by setting its octave to 0.

        Args:
            interval: Interval array [letter, alteration, octave]

        Returns:
            JSON string with the simplified interval

        Example:
            pitch_simplify(interval=[1, 2, 3])  # -> [1, 2, 0]
        """
        try:
            result = simplify(parse_pitch(interval))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to simplify interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_simplify"] = pitch_simplify

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_set_default_octave(octave: int, pitch: list[int | None] | None) -> str:
        """
        Set the octave only if the pitch has none.

        Args:
            octave: Octave to use when the pitch has none
            pitch: Pitch array [letter, alteration, octave]

        Returns:
            JSON string with the pitch

        Example:
            pitch_set_default_octave(octave=4, pitch=[1, 2, null])  # -> [1, 2, 4]
            pitch_set_default_octave(octave=4, pitch=[1, 2, 3])  # -> [1, 2, 3]
        """
        try:
            result = set_default_octave(octave, parse_pitch(pitch))
            return json.dumps({"status": "success", "result": dump_pitch(result)})
        except Exception as e:
            logger.exception("Failed to set default octave")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_set_default_octave"] = pitch_set_default_octave

    return tools
