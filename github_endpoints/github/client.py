"""GitHub API client used by every endpoint function.

Uses httpx for async HTTP calls. A client is opened per operation and
closed when the operation returns:

    async with GitHubClient(token, settings) as gh:
        pr = await gh.get(f"/repos/{owner}/{repo}/pulls/{number}")

The client applies the fixed User-Agent, bearer credentials and API
version header, decodes JSON, follows ``Link`` pagination, and turns
non-2xx responses into `GitHubApiError`. It holds no state beyond the
underlying httpx connection.
"""

import logging
from typing import Any, Optional

import httpx

from github_endpoints.core.config import Settings, get_settings
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import GitHubApiError

logger = logging.getLogger(__name__)

GITHUB_JSON = "application/vnd.github+json"
GITHUB_RAW = "application/vnd.github.raw"
GITHUB_HTML = "application/vnd.github.html"
GITHUB_SHA = "application/vnd.github.sha"
APPLICATION_JSON = "application/json"


class GitHubClient:
    def __init__(self, token: str, settings: Optional[Settings] = None):
        self._token = token
        self.settings = settings or get_settings()
        self._http: Optional[httpx.AsyncClient] = None

    @classmethod
    def for_context(cls, ctx: GitHubContext) -> "GitHubClient":
        return cls(ctx.token, ctx.settings)

    async def __aenter__(self) -> "GitHubClient":
        self._http = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            headers=_auth_headers(self._token, self.settings),
            timeout=self.settings.request_timeout,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Raises GitHubApiError on transport failures and non-2xx statuses.
        """
        if self._http is None:
            raise RuntimeError("GitHubClient must be used as an async context manager")

        try:
            response = await self._http.request(
                method,
                url,
                params=_drop_none(params),
                json=json,
                content=content,
                headers=headers,
            )
        except httpx.TransportError as exc:
            raise GitHubApiError(None, str(exc) or type(exc).__name__) from exc

        _raise_for_status(response)
        return response

    async def request(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and decode the JSON body (None for empty bodies)."""
        response = await self.send(method, url, **kwargs)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, url: str, **kwargs) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs) -> Any:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def get_bytes(
        self, url: str, *, accept: str = GITHUB_RAW, params: Optional[dict] = None
    ) -> bytes:
        response = await self.send("GET", url, params=params, headers={"Accept": accept})
        return response.content

    async def get_text(
        self, url: str, *, accept: str = GITHUB_RAW, params: Optional[dict] = None
    ) -> str:
        response = await self.send("GET", url, params=params, headers={"Accept": accept})
        return response.text

    async def exists(self, url: str) -> bool:
        """Probe an endpoint that answers 204 for yes and 404 for no."""
        try:
            await self.send("GET", url)
        except GitHubApiError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True

    async def paginate(self, url: str, *, params: Optional[dict] = None) -> list:
        """Collect every page of a list endpoint by following ``Link: rel=next``."""
        query = {"per_page": self.settings.page_size, **(params or {})}
        response = await self.send("GET", url, params=query)
        items = list(response.json())

        next_link = response.links.get("next")
        while next_link:
            # The next URL already carries every query parameter.
            response = await self.send("GET", next_link["url"])
            items.extend(response.json())
            next_link = response.links.get("next")

        logger.debug("Fetched %d items from %s", len(items), url)
        return items

    async def graphql(self, query: str) -> dict:
        """POST a GraphQL document to the configured GraphQL endpoint."""
        return await self.request(
            "POST",
            self.settings.graphql_url,
            json={"query": query},
            headers={"Content-Type": APPLICATION_JSON},
        )


def _auth_headers(token: str, settings: Settings) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": GITHUB_JSON,
        "User-Agent": settings.user_agent,
        "X-GitHub-Api-Version": settings.api_version,
    }


def _drop_none(params: Optional[dict]) -> Optional[dict]:
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return

    message = response.reason_phrase or "request failed"
    documentation_url = None
    try:
        data = response.json()
    except ValueError:
        if response.text:
            message = response.text
    else:
        if isinstance(data, dict):
            message = data.get("message", message)
            documentation_url = data.get("documentation_url")

    raise GitHubApiError(response.status_code, message, documentation_url)
