"""MCP tool registration"""

from .devlog_tools import register_devlog_tools
from .report_tools import register_report_tools

__all__ = ["register_devlog_tools", "register_report_tools"]
