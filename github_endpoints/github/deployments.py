"""Deployment and deployment status endpoints."""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.schemas import NewDeployment, NewDeploymentStatus


async def list_deployments(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/deployments")


async def create_deployment(ctx: GitHubContext, deployment: NewDeployment) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{ctx.repo_path}/deployments", json=deployment.to_payload())


async def list_deployment_statuses(ctx: GitHubContext, deployment_id: int) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{ctx.repo_path}/deployments/{deployment_id}/statuses")


async def create_deployment_status(
    ctx: GitHubContext, deployment_id: int, status: NewDeploymentStatus
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            f"{ctx.repo_path}/deployments/{deployment_id}/statuses",
            json=status.to_payload(),
        )
