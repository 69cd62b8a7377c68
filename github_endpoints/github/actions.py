"""GitHub Actions endpoints: workflows, workflow runs and jobs.

Workflows are addressed either by numeric id or by workflow file name
(``ci.yml``); both are accepted wherever ``workflow`` appears. List
endpoints return GitHub's envelope (``total_count`` plus the items) as-is.
"""

from typing import Any, Optional, Sequence, Union

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require

WorkflowId = Union[int, str]


def _actions(ctx: GitHubContext) -> str:
    return f"{ctx.repo_path}/actions"


def _workflow(ctx: GitHubContext, workflow: WorkflowId) -> str:
    require(workflow, "workflow")
    return f"{_actions(ctx)}/workflows/{workflow}"


def _run(ctx: GitHubContext, run_id: int) -> str:
    return f"{_actions(ctx)}/runs/{run_id}"


# ---------------------------------------------------------------------------
# Workflows
# ---------------------------------------------------------------------------


async def list_workflows(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(
            f"{_actions(ctx)}/workflows", params={"per_page": ctx.settings.page_size}
        )


async def get_workflow(ctx: GitHubContext, workflow: WorkflowId) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_workflow(ctx, workflow))


async def get_workflow_usage(ctx: GitHubContext, workflow: WorkflowId) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_workflow(ctx, workflow)}/timing")


async def enable_workflow(ctx: GitHubContext, workflow: WorkflowId) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.put(f"{_workflow(ctx, workflow)}/enable")


async def disable_workflow(ctx: GitHubContext, workflow: WorkflowId) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.put(f"{_workflow(ctx, workflow)}/disable")


async def dispatch_workflow(
    ctx: GitHubContext,
    workflow: WorkflowId,
    ref: str,
    inputs: Optional[dict[str, Any]] = None,
) -> None:
    """Trigger a ``workflow_dispatch`` event for ``workflow`` on ``ref``."""
    require(ref, "ref")
    payload: dict[str, Any] = {"ref": ref}
    if inputs:
        payload["inputs"] = inputs
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_workflow(ctx, workflow)}/dispatches", json=payload)


# ---------------------------------------------------------------------------
# Workflow runs
# ---------------------------------------------------------------------------


def _run_filters(filters: dict[str, Any], page_size: int) -> dict[str, Any]:
    params = {k: v for k, v in filters.items() if v is not None}
    params.setdefault("per_page", page_size)
    return params


async def list_workflow_runs(ctx: GitHubContext, **filters: Any) -> dict:
    """List runs for the repository.

    ``filters`` are passed as query parameters: ``actor``, ``branch``,
    ``event``, ``status``, ``created``, ``head_sha``, ``page``, ...
    """
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(
            f"{_actions(ctx)}/runs",
            params=_run_filters(filters, ctx.settings.page_size),
        )


async def list_workflow_runs_for_workflow(
    ctx: GitHubContext, workflow: WorkflowId, **filters: Any
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(
            f"{_workflow(ctx, workflow)}/runs",
            params=_run_filters(filters, ctx.settings.page_size),
        )


async def get_workflow_run(ctx: GitHubContext, run_id: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_run(ctx, run_id))


async def delete_workflow_run(ctx: GitHubContext, run_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(_run(ctx, run_id))


async def get_workflow_run_review_history(ctx: GitHubContext, run_id: int) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_run(ctx, run_id)}/approvals")


async def review_pending_deployments(
    ctx: GitHubContext,
    run_id: int,
    environment_ids: Sequence[int],
    state: str,
    comment: str = "",
) -> list[dict]:
    """Approve or reject deployments waiting on protected environments.

    ``state`` is ``"approved"`` or ``"rejected"``.
    """
    payload = {"environment_ids": list(environment_ids), "state": state, "comment": comment}
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_run(ctx, run_id)}/pending_deployments", json=payload)


async def approve_workflow_run(ctx: GitHubContext, run_id: int) -> None:
    """Approve a run from a first-time contributor's fork."""
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_run(ctx, run_id)}/approve")


async def get_workflow_run_attempt(
    ctx: GitHubContext, run_id: int, attempt_number: int
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_run(ctx, run_id)}/attempts/{attempt_number}")


async def get_workflow_run_attempt_logs(
    ctx: GitHubContext, run_id: int, attempt_number: int
) -> bytes:
    """Zip archive of the logs for one attempt of a run."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_bytes(
            f"{_run(ctx, run_id)}/attempts/{attempt_number}/logs", accept="*/*"
        )


async def cancel_workflow_run(ctx: GitHubContext, run_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_run(ctx, run_id)}/cancel")


async def get_workflow_run_logs(ctx: GitHubContext, run_id: int) -> bytes:
    """Zip archive of the logs for the latest attempt of a run."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_bytes(f"{_run(ctx, run_id)}/logs", accept="*/*")


async def delete_workflow_run_logs(ctx: GitHubContext, run_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{_run(ctx, run_id)}/logs")


async def rerun_workflow_run(ctx: GitHubContext, run_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_run(ctx, run_id)}/rerun")


async def rerun_failed_jobs(ctx: GitHubContext, run_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_run(ctx, run_id)}/rerun-failed-jobs")


async def get_workflow_run_usage(ctx: GitHubContext, run_id: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_run(ctx, run_id)}/timing")


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


async def get_job(ctx: GitHubContext, job_id: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_actions(ctx)}/jobs/{job_id}")


async def get_job_logs(ctx: GitHubContext, job_id: int) -> str:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_text(f"{_actions(ctx)}/jobs/{job_id}/logs", accept="*/*")


async def rerun_job(ctx: GitHubContext, job_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.post(f"{_actions(ctx)}/jobs/{job_id}/rerun")


async def list_jobs(
    ctx: GitHubContext,
    run_id: int,
    job_filter: Optional[str] = None,
    attempt_number: Optional[int] = None,
) -> dict:
    """List jobs of a run.

    With ``attempt_number`` the jobs of that attempt are listed; otherwise
    ``job_filter`` (``"latest"`` or ``"all"``) selects across attempts.
    """
    params: dict[str, Any] = {"per_page": ctx.settings.page_size}
    if attempt_number is not None:
        url = f"{_run(ctx, run_id)}/attempts/{attempt_number}/jobs"
    else:
        url = f"{_run(ctx, run_id)}/jobs"
        params["filter"] = job_filter

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(url, params=params)
