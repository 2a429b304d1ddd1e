"""
Height tools - MCP tools for measuring and ordering pitches.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core import semitones, sort_pitches
from chuk_mcp_pitch.models import dump_pitch, parse_pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_height_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register height tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_semitones(pitch: list[int | None] | None) -> str:
        """
        Get the distance in semitones from [0, 0, 0] (C0, or a unison).

        The pitch needs an octave; pitch classes have no height.

        Args:
            pitch: Pitch or interval array [letter, alteration, octave]

        Returns:
            JSON string with the semitone count

        Example:
            pitch_semitones(pitch=[1, 1, 0])  # -> 3
        """
        try:
            parsed = parse_pitch(pitch)
            if parsed is not None and parsed.octave is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.OCTAVE_REQUIRED.format(pitch=pitch),
                    }
                )
            return json.dumps({"status": "success", "semitones": semitones(parsed)})
        except Exception as e:
            logger.exception("Failed to measure semitones")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_semitones"] = pitch_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_sort(pitches: list[list[int | None]], descending: bool = False) -> str:
        """
        Sort pitches by height.

        All pitches need an octave.

        Args:
            pitches: List of pitch arrays
            descending: Highest first when true (default: lowest first)

        Returns:
            JSON string with the sorted pitches

        Example:
            pitch_sort(pitches=[[4, 0, 0], [0, 0, 0], [2, 0, 0]])
            # -> [[0, 0, 0], [2, 0, 0], [4, 0, 0]]
        """
        try:
            parsed = [parse_pitch(p) for p in pitches]
            for original, p in zip(pitches, parsed, strict=True):
                if p is None or p.octave is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.OCTAVE_REQUIRED.format(pitch=original),
                        }
                    )
            ordered = sort_pitches(parsed, descending=descending)  # type: ignore[arg-type]
            logger.debug(f"Sorted {len(ordered)} pitches (descending={descending})")
            return json.dumps(
                {
                    "status": "success",
                    "pitches": [dump_pitch(p) for p in ordered],
                    "count": len(ordered),
                }
            )
        except Exception as e:
            logger.exception("Failed to sort pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_sort"] = pitch_sort

    return tools
