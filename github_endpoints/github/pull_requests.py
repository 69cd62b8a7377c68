"""Pull request endpoints, including GraphQL auto-merge.

The REST API has no endpoint for enabling auto-merge, so
`enable_auto_merge` reads the pull request's GraphQL node id over REST
and issues the ``enablePullRequestAutoMerge`` mutation directly.
"""

import json
import logging
from typing import Optional, Sequence

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import (
    GitHubApiError,
    InvalidArgumentError,
    NotFoundError,
)
from github_endpoints.github.schemas import LockReason, MergeMethod, ReviewEvent

logger = logging.getLogger(__name__)


def _pulls(ctx: GitHubContext, number: Optional[int] = None) -> str:
    if number is None:
        return f"{ctx.repo_path}/pulls"
    return f"{ctx.repo_path}/pulls/{number}"


async def get_pull_request(ctx: GitHubContext, number: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_pulls(ctx, number))


async def list_pull_requests(ctx: GitHubContext, state: str = "open") -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(_pulls(ctx), params={"state": state})


async def create_pull_request(
    ctx: GitHubContext, title: str, head: str, base: str
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            _pulls(ctx), json={"title": title, "head": head, "base": base}
        )


async def create_pull_request_from_issue(
    ctx: GitHubContext, issue_number: int, head: str, base: str
) -> dict:
    """Convert an existing issue into a pull request."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            _pulls(ctx), json={"issue": issue_number, "head": head, "base": base}
        )


async def update_pull_request(
    ctx: GitHubContext,
    number: int,
    title: str,
    body: Optional[str] = None,
    is_open: bool = True,
    base: Optional[str] = None,
) -> dict:
    payload = {"title": title, "state": "open" if is_open else "closed"}
    if body is not None:
        payload["body"] = body
    if base is not None:
        payload["base"] = base

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch(_pulls(ctx, number), json=payload)


async def merge_pull_request(
    ctx: GitHubContext,
    number: int,
    title: Optional[str] = None,
    message: Optional[str] = None,
    merge_method: MergeMethod = MergeMethod.SQUASH,
) -> dict:
    """Merge a pull request now. Squash-merges unless told otherwise."""
    payload = {"merge_method": MergeMethod(merge_method).value}
    if title is not None:
        payload["commit_title"] = title
    if message is not None:
        payload["commit_message"] = message

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.put(f"{_pulls(ctx, number)}/merge", json=payload)


def build_auto_merge_mutation(node_id: str, merge_method: MergeMethod) -> str:
    """Build the GraphQL document that enables auto-merge on a pull request."""
    method = MergeMethod(merge_method).value.upper()
    return (
        "mutation PullRequestAutoMerge { enablePullRequestAutoMerge("
        f"input: {{pullRequestId: {json.dumps(node_id)}, mergeMethod: {method}}}"
        ") { clientMutationId } }"
    )


async def enable_auto_merge(
    ctx: GitHubContext,
    number: int,
    merge_method: MergeMethod = MergeMethod.SQUASH,
) -> dict:
    """Enable auto-merge on a pull request.

    Returns the pull request as read before the mutation; the returned
    object does not show auto-merge as enabled. The mutation response is
    not inspected beyond logging GraphQL errors.

    Raises:
        NotFoundError: The pull request does not exist. No mutation is sent.
        GitHubApiError: Either request failed.
    """
    async with GitHubClient.for_context(ctx) as gh:
        try:
            pr = await gh.get(_pulls(ctx, number))
        except GitHubApiError as exc:
            if exc.status_code == 404:
                raise NotFoundError(f"Pull request {number} not found") from exc
            raise

        mutation = build_auto_merge_mutation(pr["node_id"], merge_method)
        result = await gh.graphql(mutation)

    if isinstance(result, dict) and result.get("errors"):
        logger.warning(
            "Auto-merge mutation for %s#%s reported errors: %s",
            ctx.repo_name,
            number,
            [e.get("message") for e in result["errors"]],
        )
    else:
        logger.info("Auto-merge requested for %s#%s", ctx.repo_name, number)
    return pr


async def is_pull_request_merged(ctx: GitHubContext, number: int) -> bool:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.exists(f"{_pulls(ctx, number)}/merge")


async def lock_pull_request(
    ctx: GitHubContext, number: int, lock_reason: Optional[LockReason] = None
) -> None:
    # Pull request locking goes through the issues API.
    payload = {"lock_reason": LockReason(lock_reason).value} if lock_reason else None
    async with GitHubClient.for_context(ctx) as gh:
        await gh.put(f"{ctx.repo_path}/issues/{number}/lock", json=payload)


async def unlock_pull_request(ctx: GitHubContext, number: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{ctx.repo_path}/issues/{number}/lock")


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


async def get_review(ctx: GitHubContext, number: int, review_id: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_pulls(ctx, number)}/reviews/{review_id}")


async def list_reviews(ctx: GitHubContext, number: int) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{_pulls(ctx, number)}/reviews")


async def list_review_comments(
    ctx: GitHubContext, number: int, review_id: int
) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{_pulls(ctx, number)}/reviews/{review_id}/comments")


async def create_review(
    ctx: GitHubContext, number: int, body: Optional[str] = None
) -> dict:
    """Start a pending review; submit it with `submit_review`."""
    payload = {"body": body} if body is not None else {}
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_pulls(ctx, number)}/reviews", json=payload)


async def delete_review(ctx: GitHubContext, number: int, review_id: int) -> dict:
    """Delete a review that has not been submitted yet."""
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.delete(f"{_pulls(ctx, number)}/reviews/{review_id}")


async def submit_review(
    ctx: GitHubContext,
    number: int,
    review_id: int,
    event: ReviewEvent,
    body: Optional[str] = None,
) -> dict:
    payload = {"event": ReviewEvent(event).value}
    if body is not None:
        payload["body"] = body
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            f"{_pulls(ctx, number)}/reviews/{review_id}/events", json=payload
        )


async def dismiss_review(
    ctx: GitHubContext, number: int, review_id: int, message: Optional[str] = None
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.put(
            f"{_pulls(ctx, number)}/reviews/{review_id}/dismissals",
            json={"message": message or ""},
        )


# ---------------------------------------------------------------------------
# Review requests
# ---------------------------------------------------------------------------


def _reviewer_payload(
    reviewers: Optional[Sequence[str]], team_reviewers: Optional[Sequence[str]]
) -> dict:
    if not reviewers and not team_reviewers:
        raise InvalidArgumentError(
            "reviewers", "At least one reviewer or team reviewer is required"
        )
    return {
        "reviewers": list(reviewers or []),
        "team_reviewers": list(team_reviewers or []),
    }


async def get_review_requests(ctx: GitHubContext, number: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_pulls(ctx, number)}/requested_reviewers")


async def request_reviewers(
    ctx: GitHubContext,
    number: int,
    reviewers: Optional[Sequence[str]] = None,
    team_reviewers: Optional[Sequence[str]] = None,
) -> dict:
    payload = _reviewer_payload(reviewers, team_reviewers)
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_pulls(ctx, number)}/requested_reviewers", json=payload)


async def remove_review_requests(
    ctx: GitHubContext,
    number: int,
    reviewers: Optional[Sequence[str]] = None,
    team_reviewers: Optional[Sequence[str]] = None,
) -> dict:
    payload = _reviewer_payload(reviewers, team_reviewers)
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.delete(
            f"{_pulls(ctx, number)}/requested_reviewers", json=payload
        )
