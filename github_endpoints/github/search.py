"""Search endpoints.

Each function takes the raw search query (``q``) plus optional sort/order
and page selection. Results are GitHub's envelope: ``total_count``,
``incomplete_results`` and ``items``.
"""

from typing import Any, Optional

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require


async def _search(
    ctx: GitHubContext,
    kind: str,
    query: str,
    sort: Optional[str],
    order: Optional[str],
    page: Optional[int],
    **extra: Any,
) -> dict:
    require(query, "query")
    params = {
        "q": query,
        "sort": sort,
        "order": order,
        "page": page,
        "per_page": ctx.settings.page_size,
        **extra,
    }
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"/search/{kind}", params=params)


async def search_repositories(
    ctx: GitHubContext,
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
) -> dict:
    return await _search(ctx, "repositories", query, sort, order, page)


async def search_users(
    ctx: GitHubContext,
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
) -> dict:
    return await _search(ctx, "users", query, sort, order, page)


async def search_issues(
    ctx: GitHubContext,
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
) -> dict:
    return await _search(ctx, "issues", query, sort, order, page)


async def search_code(
    ctx: GitHubContext,
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
) -> dict:
    return await _search(ctx, "code", query, sort, order, page)


async def search_labels(
    ctx: GitHubContext,
    repository_id: int,
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
) -> dict:
    """Label search is scoped to one repository, by numeric id."""
    return await _search(
        ctx, "labels", query, sort, order, page, repository_id=repository_id
    )
