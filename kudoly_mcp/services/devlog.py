"""Knowledge document (DEVLOG) saving for the generate_devlog MCP tool."""

from typing import Protocol

import structlog

from ..config import DEVLOG_FILENAME
from ..models import (
    DevlogSavedResult,
    ErrorResult,
    GenerateDevlogInput,
    GenerateDevlogResult,
    SaveDevlogRequest,
    SaveDevlogResponse,
)
from .daily_report import resolve_project_name
from .error_mapping import ErrorRule, map_api_error

logger = structlog.get_logger(__name__)

DEVLOG_ERROR_RULES = {
    "TASK_NOT_FOUND": ErrorRule('Task "{task_name}" not found in ClickUp.'),
    "PROJECT_NOT_FOUND": ErrorRule('Project "{project_name}" not found.'),
}


class DevlogAPI(Protocol):
    async def save_devlog(self, request: SaveDevlogRequest) -> SaveDevlogResponse: ...


async def generate_devlog(
    data: GenerateDevlogInput, api: DevlogAPI
) -> GenerateDevlogResult:
    """
    Save a markdown knowledge document on a ClickUp task.

    Returns:
        DevlogSavedResult on success, ErrorResult otherwise. Never raises.
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
            message="Please provide the task that should receive the DEVLOG.",
        )

    if not data.devlog_content or not data.devlog_content.strip():
        return ErrorResult(
            code="DEVLOG_CONTENT_REQUIRED",
            message="The DEVLOG content cannot be empty.",
        )

    try:
        saved = await api.save_devlog(
            SaveDevlogRequest(
                project_name=project_name,
                task_name=data.task_name,
                devlog_content=data.devlog_content,
                filename=DEVLOG_FILENAME,
            )
        )
    except Exception as e:
        logger.warning("Devlog save failed", project_name=project_name, error=str(e))
        return map_api_error(
            e,
            DEVLOG_ERROR_RULES,
            pass_through_projects=False,
            project_name=project_name,
            task_name=data.task_name,
        )

    task_name = saved.task_name or data.task_name
    logger.info("Devlog saved", task_name=task_name, file_url=saved.file_url)

    return DevlogSavedResult(
        message=saved.message or f'DEVLOG saved on task "{task_name}".',
        task_name=task_name,
        filename=saved.filename or DEVLOG_FILENAME,
        file_url=saved.file_url,
    )
