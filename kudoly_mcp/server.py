"""Kudoly MCP Server - tool and prompt registration"""

import structlog
from mcp.server.fastmcp import FastMCP

from .tools import register_devlog_tools, register_report_tools

logger = structlog.get_logger(__name__)

# Create the MCP server instance
mcp = FastMCP("kudoly-mcp")

# Register Daily Report Tools
register_report_tools(mcp)

# Register Devlog Tools
register_devlog_tools(mcp)


class KudolyMCPServer:
    """MCP Server for Kudoly daily reports"""

    def __init__(self):
        logger.info("Kudoly MCP Server initialized")

    def run(self):
        """Run the MCP server over stdio"""
        logger.info("Starting Kudoly MCP Server")
        mcp.run()
