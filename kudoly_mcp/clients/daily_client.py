"""Daily report API client"""

from ..models import (
    CheckTaskRequest,
    CheckTaskResponse,
    SaveReportRequest,
    SaveReportResponse,
)
from .base import BaseAPIClient


class DailyAPIClient(BaseAPIClient):
    """API client for daily report operations"""

    async def check_task(self, request: CheckTaskRequest) -> CheckTaskResponse:
        """Look up a task by name under a project"""
        response = await self._post("/daily-check-task", request.to_payload())
        return CheckTaskResponse.model_validate(response)

    async def save_report(self, request: SaveReportRequest) -> SaveReportResponse:
        """Save a daily report, creating the ClickUp task when requested"""
        response = await self._post("/daily-save-report", request.to_payload())
        return SaveReportResponse.model_validate(response)
