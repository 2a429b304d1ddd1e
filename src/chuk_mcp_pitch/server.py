#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Pitch MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so --help stays fast
    from chuk_mcp_pitch.async_server import TOOL_GROUPS, mcp

    tool_count = sum(len(names) for names in TOOL_GROUPS.values())

    if args.transport == "stdio":
        logger.info(f"Serving {tool_count} pitch arithmetic tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Serving {tool_count} pitch arithmetic tools on http port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
