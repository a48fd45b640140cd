"""Tests for MCP tool and prompt registration"""

import pytest

from kudoly_mcp.server import mcp
from kudoly_mcp.tools.report_tools import build_register_daily_prompt


@pytest.mark.asyncio
async def test_tools_registered():
    tools = {tool.name: tool for tool in await mcp.list_tools()}

    assert set(tools) == {"submit_daily_report", "generate_devlog"}

    report_params = tools["submit_daily_report"].inputSchema["properties"]
    assert {
        "activities_string",
        "project_name",
        "task_name",
        "status",
        "create_task",
        "clickup_status",
    } <= set(report_params)
    assert tools["submit_daily_report"].inputSchema["required"] == [
        "activities_string"
    ]

    devlog_params = tools["generate_devlog"].inputSchema["properties"]
    assert {"task_name", "devlog_content", "project_name"} <= set(devlog_params)


@pytest.mark.asyncio
async def test_register_daily_prompt_registered():
    prompts = [prompt.name for prompt in await mcp.list_prompts()]
    assert "register-daily" in prompts


def test_register_daily_prompt_includes_context():
    text = build_register_daily_prompt("Fixed the login bug")
    assert "Provided context: Fixed the login bug" in text
    assert "submit_daily_report" in text


def test_register_daily_prompt_without_context():
    assert "Provided context" not in build_register_daily_prompt()
