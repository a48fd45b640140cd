"""
Unified API Client Facade

Provides both domain-specific access (client.daily.check_task(...))
and flat access (client.check_task(...)) to the Kudoly backend.
"""

from typing import Optional

import structlog

from .clients import DailyAPIClient, DevlogAPIClient, KudolyAPIError
from .config import API_TIMEOUT, KUDOLY_API_TOKEN, KUDOLY_BASE_URL
from .models import (
    CheckTaskRequest,
    CheckTaskResponse,
    SaveDevlogRequest,
    SaveDevlogResponse,
    SaveReportRequest,
    SaveReportResponse,
)

logger = structlog.get_logger(__name__)


class KudolyAPIClient:
    """
    Unified facade combining domain-specific API clients.

    Usage:
        async with KudolyAPIClient(base_url, token) as client:
            task = await client.check_task(CheckTaskRequest(...))
            saved = await client.save_report(SaveReportRequest(...))

    Raises ConfigurationError on construction when base_url or token is
    empty. Holds no state besides its configuration and the open
    connections of the current context.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = API_TIMEOUT,
    ):
        base_url = KUDOLY_BASE_URL if base_url is None else base_url
        token = KUDOLY_API_TOKEN if token is None else token

        self.daily = DailyAPIClient(base_url, token, timeout)
        self.devlog = DevlogAPIClient(base_url, token, timeout)
        self.base_url = self.daily.base_url

        logger.info("Unified API client initialized", base_url=self.base_url)

    async def __aenter__(self):
        """Enter async context - initialize all domain clients"""
        await self.daily.__aenter__()
        try:
            await self.devlog.__aenter__()
        except BaseException as e:
            await self.daily.__aexit__(type(e), e, e.__traceback__)
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context - cleanup all domain clients"""
        await self.daily.__aexit__(exc_type, exc_val, exc_tb)
        await self.devlog.__aexit__(exc_type, exc_val, exc_tb)

    async def check_task(self, request: CheckTaskRequest) -> CheckTaskResponse:
        return await self.daily.check_task(request)

    async def save_report(self, request: SaveReportRequest) -> SaveReportResponse:
        return await self.daily.save_report(request)

    async def save_devlog(self, request: SaveDevlogRequest) -> SaveDevlogResponse:
        return await self.devlog.save_devlog(request)


def get_api_client() -> KudolyAPIClient:
    """Build an API client from the environment configuration.

    Returns a new client on every call; one client serves one
    ``async with`` block at a time.
    """
    return KudolyAPIClient()


__all__ = ["KudolyAPIClient", "KudolyAPIError", "get_api_client"]
