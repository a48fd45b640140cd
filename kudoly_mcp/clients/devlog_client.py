"""Devlog API client"""

from ..models import SaveDevlogRequest, SaveDevlogResponse
from .base import BaseAPIClient


class DevlogAPIClient(BaseAPIClient):
    """API client for knowledge documents attached to tasks"""

    async def save_devlog(self, request: SaveDevlogRequest) -> SaveDevlogResponse:
        """Attach a markdown document to a ClickUp task"""
        response = await self._post("/daily-save-devlog", request.to_payload())
        return SaveDevlogResponse.model_validate(response)
