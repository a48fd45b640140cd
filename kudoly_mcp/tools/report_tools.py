"""
MCP tools for daily reports.

Provides:
- submit_daily_report: register an activity against a ClickUp task
- register-daily prompt: guided conversation that ends in the tool call

The business logic lives in kudoly_mcp.services.daily_report.
"""

from typing import Any, Optional

import structlog
from mcp.server.fastmcp import FastMCP

from ..api_client import get_api_client
from ..models import ReportStatus, SubmitDailyReportInput
from ..services.daily_report import submit_daily_report as _submit_daily_report
from ..telemetry import trace_mcp_tool

logger = structlog.get_logger(__name__)

SUBMIT_DAILY_REPORT_DESCRIPTION = """Register a daily activity, checking the task in ClickUp.

IMPORTANT: NEVER run this tool straight away. Follow this conversation flow BEFORE calling it:

1. PROJECT: If the user does not mention the project, try the local manifest (package.json or pyproject.toml). If that fails, ask: "Which project are you working on?"

2. TASK: Ask: "What is the name of the task you want to register?"

3. SUMMARY: Analyse the chat context and write a summary that:
   - Non-technical people (stakeholders, managers) can understand
   - Focuses on WHAT was done and WHY, not on technical details
   - Is short (2-4 sentences at most)
   Show the summary and ask: "This is the summary for the daily: [summary]. Should I register it, or is there anything to add or change?"

4. STATUS: Ask: "What is the status? (complete, progress, blocked, upcoming, qa)" or infer it from the context.

5. Only once ALL the information is confirmed, run the tool.

6. If the tool returns task_found=false, ask the user whether to create the task and with which ClickUp status."""

REGISTER_DAILY_DESCRIPTION = "Start the guided flow to register a daily activity"


def build_register_daily_prompt(context: Optional[str] = None) -> str:
    context_info = f"\n\nProvided context: {context}" if context else ""

    return f"""I want to register today's daily.{context_info}

Please guide me step by step:
1. First confirm the project (you can try reading it from the local manifest)
2. Ask me for the task name
3. Write an executive summary of my activities based on our conversation
4. Confirm the task status
5. Only then use the submit_daily_report tool

Let's start."""


def register_report_tools(mcp: FastMCP) -> None:
    """Register daily report tools and prompts with the MCP server.

    Args:
        mcp: The FastMCP server instance to register tools with.
    """

    @mcp.tool(name="submit_daily_report", description=SUBMIT_DAILY_REPORT_DESCRIPTION)
    @trace_mcp_tool("submit_daily_report")
    async def submit_daily_report(
        activities_string: str,
        project_name: Optional[str] = None,
        task_name: Optional[str] = None,
        status: ReportStatus = ReportStatus.PROGRESS,
        create_task: bool = False,
        clickup_status: Optional[str] = None,
    ) -> dict[str, Any]:
        data = SubmitDailyReportInput(
            project_name=project_name,
            task_name=task_name,
            activities_string=activities_string,
            status=status,
            create_task=create_task,
            clickup_status=clickup_status,
        )
        async with get_api_client() as client:
            result = await _submit_daily_report(data, client)

        logger.info("submit_daily_report finished", result_type=result.type)
        return result.to_dict()

    @mcp.prompt(name="register-daily", description=REGISTER_DAILY_DESCRIPTION)
    def register_daily(context: Optional[str] = None) -> str:
        return build_register_daily_prompt(context)
