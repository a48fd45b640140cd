"""MCP tool for saving DEVLOG knowledge documents on ClickUp tasks."""

from typing import Any, Optional

import structlog
from mcp.server.fastmcp import FastMCP

from ..api_client import get_api_client
from ..models import GenerateDevlogInput
from ..services.devlog import generate_devlog as _generate_devlog
from ..telemetry import trace_mcp_tool

logger = structlog.get_logger(__name__)

GENERATE_DEVLOG_DESCRIPTION = """Generate and save a knowledge document (DEVLOG.md) on a ClickUp task.

IMPORTANT: NEVER run this tool straight away. Follow this conversation flow BEFORE calling it:

1. PROJECT AND TASK:
   - Project: read it from the local manifest or ask "Which project are you working on?"
   - Task: ask "Which task is this DEVLOG for?"

2. ANALYSE THE WHOLE CONTEXT:
   Go through the ENTIRE chat history, including:
   - Code written or changed
   - Files created
   - Commands run
   - Errors found and how they were solved
   - Decisions taken during the conversation

3. WRITE THE DEVLOG with this structure:
   ---
   project: [name]
   task: [name]
   date: [YYYY-MM-DD]
   tags: [technologies, key concepts]
   ---

   # [Descriptive title]

   ## Context
   [Why this change was needed]

   ## What was done
   [Clear description of the solution]

   ## Technical decisions
   [Each decision with its rationale, alternatives and trade-offs]

   ## Implementation
   [Files involved, data flow, dependencies]

   ## Problems and solutions
   [Errors found, causes, how they were solved]

   ## Setup and usage
   [How to run or test it, environment variables]

   ## Known limitations
   [What it does NOT do, edge cases, pending improvements]

   ## Search keywords
   [Terms that help find this document]

4. SHOW A PREVIEW AND CONFIRM:
   "This is the generated DEVLOG. Should I save it as is, or do you want to adjust something?"
   - Allow as many iterations as the user needs

5. Only then run the tool with the final content.

GOOD CONTENT is:
- Self-contained: understandable without the original chat
- Contextual: includes the WHY, not only the WHAT
- Searchable: uses relevant keywords
- Precise: exact file and function names
- Honest: documents limitations and technical debt"""


def register_devlog_tools(mcp: FastMCP) -> None:
    """Register DEVLOG tools with the MCP server."""

    @mcp.tool(name="generate_devlog", description=GENERATE_DEVLOG_DESCRIPTION)
    @trace_mcp_tool("generate_devlog")
    async def generate_devlog(
        task_name: str,
        devlog_content: str,
        project_name: Optional[str] = None,
    ) -> dict[str, Any]:
        data = GenerateDevlogInput(
            project_name=project_name,
            task_name=task_name,
            devlog_content=devlog_content,
        )
        async with get_api_client() as client:
            result = await _generate_devlog(data, client)

        logger.info("generate_devlog finished", result_type=result.type)
        return result.to_dict()
