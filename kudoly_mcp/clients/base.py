"""Base HTTP client for Kudoly API communication"""

from typing import Any, Optional

import httpx
import structlog

from ..config import ConfigurationError

logger = structlog.get_logger(__name__)

DEFAULT_ERROR_CODE = "API_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"


def _text(value: Any) -> Optional[str]:
    """Body field as a string, or None unless it is a non-empty string."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _projects(value: Any) -> Optional[list[str]]:
    """available_projects, or None unless it is a list of strings."""
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    return None


class KudolyAPIError(Exception):
    """Failure reported by the Kudoly backend"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        available_projects: Optional[list[str]] = None,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code or DEFAULT_ERROR_CODE
        self.available_projects = available_projects
        self.details = details or {}
        super().__init__(message)


class BaseAPIClient:
    """Shared HTTP client functionality for all domain clients"""

    def __init__(self, base_url: str, token: str, timeout: float = 30.0):
        if not base_url:
            raise ConfigurationError("KUDOLY_BASE_URL is required")
        if not token:
            raise ConfigurationError("KUDOLY_API_TOKEN is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self.client: Optional[httpx.AsyncClient] = None
        logger.info("API client initialized", base_url=self.base_url)

    async def __aenter__(self):
        """Async context manager entry"""
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._token}",
            },
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def _post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON payload and classify the response.

        The body is parsed whatever the status code; a body that is not a
        JSON object counts as empty.

        Raises:
            KudolyAPIError: on 401, any other non-2xx status, or a 2xx body
                carrying ``success: false``
            httpx.RequestError: when the request never got a response
        """
        if not self.client:
            raise KudolyAPIError(
                "API client not initialized. Use async context manager."
            )

        url = f"{endpoint}" if endpoint.startswith("/") else f"/{endpoint}"

        logger.debug("API request", method="POST", url=url)
        try:
            response = await self.client.request("POST", url, json=payload)
        except httpx.RequestError as e:
            logger.error("Request error", error=str(e), url=url)
            raise

        data = self._parse_body(response)
        status = response.status_code
        logger.debug(
            "API response",
            status=status,
            data_keys=list(data.keys()),
        )

        if status == 401:
            logger.error("Unauthorized", status=status, url=url)
            raise KudolyAPIError(
                _text(data.get("error")) or "Invalid or expired token",
                status_code=401,
                code=UNAUTHORIZED,
                details=data,
            )

        if not 200 <= status < 300:
            logger.error("HTTP error", status=status, url=url, code=data.get("code"))
            raise KudolyAPIError(
                _text(data.get("error"))
                or f"HTTP error: {status} {response.reason_phrase}".rstrip(),
                status_code=status,
                code=_text(data.get("code")),
                available_projects=_projects(data.get("available_projects")),
                details=data,
            )

        if data.get("success") is False:
            logger.warning("Request rejected", url=url, code=data.get("code"))
            raise KudolyAPIError(
                _text(data.get("error")) or "Request failed",
                status_code=200,
                code=_text(data.get("code")),
                available_projects=_projects(data.get("available_projects")),
                details=data,
            )

        return data

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
