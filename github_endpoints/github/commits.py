"""Repository commit endpoints (the REST view, not the git database)."""

from github_endpoints.github.client import GITHUB_SHA, GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require


async def list_branches_where_head(ctx: GitHubContext, sha: str) -> list[dict]:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/commits/{sha}/branches-where-head")


async def compare_commits(ctx: GitHubContext, base: str, head: str) -> dict:
    require(base, "base")
    require(head, "head")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/compare/{base}...{head}")


async def get_commit(ctx: GitHubContext, reference: str) -> dict:
    require(reference, "reference")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/commits/{reference}")


async def list_commits(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/commits")


async def get_commit_sha(ctx: GitHubContext, reference: str) -> str:
    """Resolve a branch, tag or partial SHA to the full commit SHA-1."""
    require(reference, "reference")
    async with GitHubClient.for_context(ctx) as gh:
        sha = await gh.get_text(f"{ctx.repo_path}/commits/{reference}", accept=GITHUB_SHA)
    return sha.strip()


async def list_commit_pull_requests(ctx: GitHubContext, sha: str) -> list[dict]:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/commits/{sha}/pulls")
