"""Word Stems MCP Server - stem frequency tools exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from word_stems import __version__
from word_stems.config import get_service_config
from word_stems.tools import analyze_text, count_file

mcp = FastMCP(
    "Word Stems MCP Server",
    instructions=(
        "Word stems MCP server. "
        "Tokenizes Russian/English text, lowercases it and counts words "
        "grouped by a crude suffix-stripped stem."
    ),
)

logger = logging.getLogger("word-stems.server")

count_file.register(mcp)
analyze_text.register(mcp)


def main():
    """Entry point for the word stems MCP server."""
    parser = argparse.ArgumentParser(
        prog="word-stems-mcp",
        description="Word Stems MCP Server - stem frequency tools exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"word-stems {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=get_service_config().log_level)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.debug("Starting word-stems MCP server (%s)", args.transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
