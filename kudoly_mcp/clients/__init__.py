"""Domain-specific API clients for the Kudoly backend"""

# Using relative imports - appropriate for package-internal modules
from .base import BaseAPIClient, KudolyAPIError
from .daily_client import DailyAPIClient
from .devlog_client import DevlogAPIClient

__all__ = [
    "BaseAPIClient",
    "KudolyAPIError",
    "DailyAPIClient",
    "DevlogAPIClient",
]
