"""Entry point for MCP server"""

import logging
import sys

from .config import ConfigurationError, setup_logging, validate_config
from .server import KudolyMCPServer

logger = logging.getLogger(__name__)


def main():
    """Main entry point"""
    setup_logging()

    try:
        validate_config()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info("Kudoly MCP Server Starting")
    logger.info("=" * 60)

    try:
        server = KudolyMCPServer()
        logger.info("MCP server initialized successfully")
        server.run()
    except KeyboardInterrupt:
        logger.info("Kudoly MCP Server Stopped")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error running MCP server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
