#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server provides MCP tools for arithmetic on pitch arrays
([letter, alteration, octave]).

The server provides tools for:
- Pitch classes, setting octaves and simplifying intervals
- Measuring semitone distance and sorting by height
- Transposing (add), measuring intervals (subtract) and scaling (multiply)
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.core import DEFAULT_CODEC
from chuk_mcp_pitch.tools import (
    register_arithmetic_tools,
    register_height_tools,
    register_octave_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-pitch"

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
octave_tools = register_octave_tools(mcp)
height_tools = register_height_tools(mcp)
arithmetic_tools = register_arithmetic_tools(mcp)

# Export tool functions for direct access
pitch_class_of = octave_tools["pitch_class_of"]
pitch_set_octave = octave_tools["pitch_set_octave"]
pitch_simplify = octave_tools["pitch_simplify"]
pitch_set_default_octave = octave_tools["pitch_set_default_octave"]

pitch_semitones = height_tools["pitch_semitones"]
pitch_sort = height_tools["pitch_sort"]

pitch_add = arithmetic_tools["pitch_add"]
pitch_subtract = arithmetic_tools["pitch_subtract"]
pitch_multiply = arithmetic_tools["pitch_multiply"]

TOOL_GROUPS: dict[str, list[str]] = {
    "octave": sorted(octave_tools),
    "height": sorted(height_tools),
    "arithmetic": sorted(arithmetic_tools),
}

logger.info("CHUK Pitch MCP Server initialized")
for group, names in TOOL_GROUPS.items():
    logger.info(f"  {group} tools: {', '.join(names)}")
logger.debug(f"  Default codec: {type(DEFAULT_CODEC).__name__}")
