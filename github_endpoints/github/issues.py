"""Issue locking endpoints."""

from typing import Optional

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.schemas import LockReason


async def lock_issue(
    ctx: GitHubContext, number: int, lock_reason: Optional[LockReason] = None
) -> None:
    payload = {"lock_reason": LockReason(lock_reason).value} if lock_reason else None
    async with GitHubClient.for_context(ctx) as gh:
        await gh.put(f"{ctx.repo_path}/issues/{number}/lock", json=payload)


async def unlock_issue(ctx: GitHubContext, number: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{ctx.repo_path}/issues/{number}/lock")
