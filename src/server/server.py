"""Server bootstrap for the Phrase locale sync MCP service.

Creates the FastMCP instance, registers the push/pull/locale_files tools
and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL

from tools.locale_files import register as register_locale_files
from tools.pull import register as register_pull
from tools.push import register as register_push

mcp = FastMCP("phrase-locales")


def register_tools() -> None:
    register_push(mcp)
    register_pull(mcp)
    register_locale_files(mcp)


def configure_logging() -> None:
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


register_tools()


def main() -> None:
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
