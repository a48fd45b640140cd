"""Orchestration services behind the MCP tools"""

from .daily_report import submit_daily_report
from .devlog import generate_devlog
from .project_name import get_project_name_from_manifest

__all__ = [
    "submit_daily_report",
    "generate_devlog",
    "get_project_name_from_manifest",
]
