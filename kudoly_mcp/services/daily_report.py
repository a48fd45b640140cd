"""
Daily report submission.

Resolves the project, checks the task in ClickUp through the backend and
saves the report. Used by the submit_daily_report MCP tool and testable
without the MCP server.
"""

from typing import Optional, Protocol

import structlog

from ..models import (
    CheckTaskRequest,
    CheckTaskResponse,
    CheckTaskResult,
    ErrorResult,
    SaveReportRequest,
    SaveReportResponse,
    SaveReportResult,
    SubmitDailyReportInput,
    SubmitDailyReportResult,
)
from . import project_name as project_name_resolver
from .error_mapping import ErrorRule, map_api_error

logger = structlog.get_logger(__name__)

REPORT_ERROR_RULES = {
    "PROJECT_NOT_FOUND": ErrorRule(
        'Project "{project_name}" not found.', include_projects=True
    ),
    "CLICKUP_NOT_CONFIGURED": ErrorRule(
        'Project "{project_name}" has no ClickUp integration configured.'
    ),
}


class DailyReportAPI(Protocol):
    async def check_task(self, request: CheckTaskRequest) -> CheckTaskResponse: ...

    async def save_report(self, request: SaveReportRequest) -> SaveReportResponse: ...


def resolve_project_name(project_name: Optional[str]) -> Optional[str]:
    """Explicit project name, else the local manifest's, else None."""
    if project_name:
        return project_name
    return project_name_resolver.get_project_name_from_manifest()


async def submit_daily_report(
    data: SubmitDailyReportInput, api: DailyReportAPI
) -> SubmitDailyReportResult:
    """
    Register a daily activity against a ClickUp task.

    Args:
        data: Validated tool input
        api: Client exposing check_task and save_report

    Returns:
        CheckTaskResult when the task does not exist and creation was not
        requested, SaveReportResult when the report was stored, ErrorResult
        otherwise. Never raises.
    """
    project_name = resolve_project_name(data.project_name)
    if not project_name:
        return ErrorResult(
            code="PROJECT_NAME_REQUIRED",
            message="Could not determine the project name. Please specify it.",
        )

    if not data.task_name:
        return ErrorResult(
            code="TASK_NAME_REQUIRED",
            message="Please provide the task name.",
        )
    task_name = data.task_name

    try:
        check = await api.check_task(
            CheckTaskRequest(project_name=project_name, task_name=task_name)
        )
    except Exception as e:
        logger.warning("Task check failed", project_name=project_name, error=str(e))
        return map_api_error(e, REPORT_ERROR_RULES, project_name=project_name)

    logger.info(
        "Task checked",
        project_name=project_name,
        task_name=task_name,
        task_found=check.task_found,
    )

    if not check.task_found and not data.create_task:
        return CheckTaskResult(
            task_found=False,
            project_id=check.project_id,
            project_name=project_name,
            clickup_list_id=check.clickup_list_id,
            available_statuses=check.available_statuses,
            message=(
                f'Task "{task_name}" does not exist in ClickUp. '
                "Do you want to create it?"
            ),
        )

    # create_task on an existing task still needs a status
    if data.create_task and not data.clickup_status:
        return ErrorResult(
            code="CLICKUP_STATUS_REQUIRED",
            message="A ClickUp status is required to create the task.",
        )

    try:
        saved = await api.save_report(
            SaveReportRequest(
                project_id=check.project_id,
                project_name=project_name,
                clickup_list_id=check.clickup_list_id,
                clickup_task_id=check.task_id,
                task_name=task_name,
                activities_string=data.activities_string,
                status=data.status,
                create_task=data.create_task,
                clickup_status=data.clickup_status,
            )
        )
    except Exception as e:
        logger.warning("Report save failed", project_name=project_name, error=str(e))
        return map_api_error(e, REPORT_ERROR_RULES, project_name=project_name)

    logger.info(
        "Daily report saved",
        daily_id=saved.daily_id,
        task_name=task_name,
        task_created=saved.task_created,
    )

    if saved.task_created:
        message = f'Report saved. Task "{task_name}" created in ClickUp.'
    else:
        message = f'Report saved for task "{task_name}".'

    return SaveReportResult(
        success=saved.success,
        daily_id=saved.daily_id,
        task_name=task_name,
        task_created=saved.task_created,
        project_name=project_name,
        message=message,
    )
