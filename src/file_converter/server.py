"""MCP stdio server exposing the conversion tools.

Registers every LangChain tool from file_converter.tools on a FastMCP server
under the same name and description, so agents speaking MCP see exactly the
tool set available to LangChain agents.

Usage:
    python -m file_converter.server
"""

import logging

from mcp.server.fastmcp import FastMCP

from file_converter.config import SERVER_NAME
from file_converter.tools import TOOLS

logger = logging.getLogger(__name__)


def build_server() -> FastMCP:
    """Create the FastMCP server with all conversion tools registered."""
    server = FastMCP(SERVER_NAME)
    for lc_tool in TOOLS:
        server.add_tool(lc_tool.func, name=lc_tool.name, description=lc_tool.description)
    logger.info("Registered %d tools: %s", len(TOOLS), [t.name for t in TOOLS])
    return server


def main():
    """Serve the tools over stdio; logs go to stderr so stdout stays protocol-only."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    build_server().run(transport="stdio")


if __name__ == "__main__":
    main()
