"""Async GitHub REST and GraphQL endpoints for build automation.

Endpoint groups live in ``github_endpoints.github.<group>``; the names
most scripts need are re-exported here.
"""

__version__ = "0.1.0"

from github_endpoints.core.config import Settings, get_settings
from github_endpoints.core.logging import configure_structlog
from github_endpoints.github.auth import (
    create_app_jwt,
    get_installation_token,
    get_repository_installation,
)
from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import (
    CryptoFailureError,
    GitHubApiError,
    GitHubEndpointsError,
    InvalidArgumentError,
    NotFoundError,
)
from github_endpoints.github.pull_requests import enable_auto_merge
from github_endpoints.github.schemas import MergeMethod

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "configure_structlog",
    "create_app_jwt",
    "get_installation_token",
    "get_repository_installation",
    "GitHubClient",
    "GitHubContext",
    "CryptoFailureError",
    "GitHubApiError",
    "GitHubEndpointsError",
    "InvalidArgumentError",
    "NotFoundError",
    "enable_auto_merge",
    "MergeMethod",
]
