"""Kudoly MCP server: daily reports and DEVLOGs for ClickUp tasks"""

__version__ = "1.0.0"
