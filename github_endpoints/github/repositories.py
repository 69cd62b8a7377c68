"""Repository endpoints, custom property values and environments."""

from typing import Mapping, Optional, Sequence, Union

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.schemas import NewRepository, RepositoryUpdate


async def get_repository(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(ctx.repo_path)


async def create_repository(
    ctx: GitHubContext,
    repository: NewRepository,
    organization: Optional[str] = None,
) -> dict:
    """Create a repository for the authenticated user, or in ``organization``."""
    url = f"/orgs/{organization}/repos" if organization and organization.strip() else "/user/repos"
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(url, json=repository.to_payload())


async def update_repository(ctx: GitHubContext, update: RepositoryUpdate) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch(ctx.repo_path, json=update.to_payload())


async def delete_repository(ctx: GitHubContext) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(ctx.repo_path)


async def list_tags(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/tags")


async def list_teams(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/teams")


async def vulnerability_alerts_enabled(ctx: GitHubContext) -> bool:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.exists(f"{ctx.repo_path}/vulnerability-alerts")


async def get_custom_property_values(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/properties/values")


async def save_custom_property_values(
    ctx: GitHubContext,
    properties: Mapping[str, Union[str, Sequence[str], None]],
) -> None:
    """Create or update custom property values; ``None`` removes a value."""
    payload = {
        "properties": [
            {
                "property_name": name,
                "value": value if value is None or isinstance(value, str) else list(value),
            }
            for name, value in properties.items()
        ]
    }
    async with GitHubClient.for_context(ctx) as gh:
        await gh.patch(f"{ctx.repo_path}/properties/values", json=payload)


async def list_environments(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(
            f"{ctx.repo_path}/environments",
            params={"per_page": ctx.settings.page_size},
        )
