"""User endpoints."""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require
from github_endpoints.github.schemas import UserUpdate


async def get_user(ctx: GitHubContext, login: str) -> dict:
    require(login, "login")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"/users/{login}")


async def update_user(ctx: GitHubContext, update: UserUpdate) -> dict:
    """Update the profile of the user the token belongs to."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch("/user", json=update.to_payload())
