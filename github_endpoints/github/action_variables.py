"""Repository GitHub Actions configuration variables."""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require


def _variables(ctx: GitHubContext) -> str:
    return f"{ctx.repo_path}/actions/variables"


async def list_variables(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_variables(ctx), params={"per_page": ctx.settings.page_size})


async def get_variable(ctx: GitHubContext, name: str) -> dict:
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_variables(ctx)}/{name}")


async def list_organization_variables(ctx: GitHubContext) -> dict:
    """Organisation variables shared with this repository."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(
            f"{ctx.repo_path}/actions/organization-variables",
            params={"per_page": ctx.settings.page_size},
        )


async def create_variable(ctx: GitHubContext, name: str, value: str) -> None:
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(_variables(ctx), json={"name": name, "value": value})


async def update_variable(ctx: GitHubContext, name: str, value: str) -> None:
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.patch(f"{_variables(ctx)}/{name}", json={"name": name, "value": value})


async def delete_variable(ctx: GitHubContext, name: str) -> None:
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{_variables(ctx)}/{name}")
