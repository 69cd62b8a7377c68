"""Branch and branch protection endpoints."""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require


def _branch(ctx: GitHubContext, branch: str) -> str:
    return f"{ctx.repo_path}/branches/{branch}"


async def list_branches(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/branches")


async def get_branch(ctx: GitHubContext, branch: str) -> dict:
    require(branch, "branch")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_branch(ctx, branch))


async def get_branch_protection(ctx: GitHubContext, branch: str) -> dict:
    require(branch, "branch")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_branch(ctx, branch)}/protection")


async def rename_branch(ctx: GitHubContext, branch: str, new_name: str) -> dict:
    require(branch, "branch")
    require(new_name, "new_name")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_branch(ctx, branch)}/rename", json={"new_name": new_name})


async def get_required_status_checks(ctx: GitHubContext, branch: str) -> dict:
    require(branch, "branch")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_branch(ctx, branch)}/protection/required_status_checks")


async def get_push_restrictions(ctx: GitHubContext, branch: str) -> dict:
    require(branch, "branch")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_branch(ctx, branch)}/protection/restrictions")
