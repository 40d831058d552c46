"""MCP Server exposing the Textus Receptus verse store.

Tools:
- get_verse / get_chapter / list_books  (verse retrieval)
- compute_gematria                      (Greek isopsephy)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from tagnt_tr.source import DATA_DIR, VerseStore
from tagnt_tr.tools import gematria, verses

logger = logging.getLogger(__name__)


def create_server(store: VerseStore) -> FastMCP:
    mcp = FastMCP("tagnt-tr")
    verses.register(mcp, store)
    gematria.register(mcp)
    return mcp


def main():
    """Run the MCP server over the imported verse store."""
    parser = argparse.ArgumentParser(
        description="TAGNT Textus Receptus MCP Server",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Verse store written by tagnt-tr-import",
    )
    parser.add_argument(
        "--sse",
        type=int,
        metavar="PORT",
        help="Run with SSE transport on specified port",
    )
    parser.add_argument(
        "--http",
        type=int,
        metavar="PORT",
        help="Run with Streamable HTTP transport on specified port",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not (args.data_dir / "metadata.json").exists():
        logger.warning(
            "No imported data at %s. Run tagnt-tr-import first.", args.data_dir
        )

    mcp = create_server(VerseStore(args.data_dir))

    if args.sse:
        transport = "sse"
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = args.sse
    elif args.http:
        transport = "streamable-http"
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = args.http
    else:
        transport = "stdio"

    logger.info("Starting TAGNT TR MCP server (transport: %s)...", transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
