"""Configuration for MCP server"""

import logging
import os
import sys
from typing import Optional

import structlog
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API Configuration
KUDOLY_BASE_URL = os.getenv("KUDOLY_BASE_URL", "")
KUDOLY_API_TOKEN = os.getenv("KUDOLY_API_TOKEN", "")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "30"))

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

# Filename used for knowledge documents saved on a task
DEVLOG_FILENAME = "DEVLOG.md"


class ConfigurationError(ValueError):
    """Raised when required configuration is missing"""


def validate_config(
    base_url: Optional[str] = None, token: Optional[str] = None
) -> None:
    """Fail fast when the backend address or token is not configured."""
    base_url = KUDOLY_BASE_URL if base_url is None else base_url
    token = KUDOLY_API_TOKEN if token is None else token

    if not base_url:
        raise ConfigurationError("KUDOLY_BASE_URL environment variable is required")
    if not token:
        raise ConfigurationError("KUDOLY_API_TOKEN environment variable is required")


def setup_logging():
    """Configure logging - JSON to stderr (for MCP), human-readable to file"""
    level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    # Human-readable format for file logs
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    # stdout carries JSON-RPC, so everything goes to stderr
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    root_logger.addHandler(stderr_handler)

    if LOG_FILE:
        file_handler = logging.FileHandler(LOG_FILE, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        root_logger.addHandler(file_handler)

    # Configure structlog for JSON output to stderr (MCP protocol)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),  # JSON for MCP protocol
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
