"""Tests for pull request endpoints and GraphQL auto-merge."""

import pytest

from github_endpoints.github.errors import GitHubApiError, InvalidArgumentError, NotFoundError
from github_endpoints.github.pull_requests import (
    build_auto_merge_mutation,
    create_pull_request,
    create_pull_request_from_issue,
    enable_auto_merge,
    is_pull_request_merged,
    list_pull_requests,
    lock_pull_request,
    merge_pull_request,
    remove_review_requests,
    request_reviewers,
    submit_review,
    update_pull_request,
)
from github_endpoints.github.schemas import LockReason, MergeMethod, ReviewEvent

PR_PATH = "/repos/acme/api/pulls/7"


def _pull_request(**overrides) -> dict:
    pr = {"number": 7, "node_id": "PR_kwAB", "state": "open", "auto_merge": None}
    pr.update(overrides)
    return pr


class TestBuildAutoMergeMutation:
    def test_rebase_mutation_is_exact(self):
        assert build_auto_merge_mutation("PR_kwAB", MergeMethod.REBASE) == (
            'mutation PullRequestAutoMerge { enablePullRequestAutoMerge('
            'input: {pullRequestId: "PR_kwAB", mergeMethod: REBASE}) { clientMutationId } }'
        )

    @pytest.mark.parametrize(
        "method, literal",
        [(MergeMethod.MERGE, "MERGE"), (MergeMethod.SQUASH, "SQUASH"), ("rebase", "REBASE")],
    )
    def test_merge_method_is_uppercased(self, method, literal):
        assert f"mergeMethod: {literal}}}" in build_auto_merge_mutation("PR_x", method)


class TestEnableAutoMerge:
    async def test_posts_mutation_to_graphql(self, fake_github, ctx):
        fake_github.add("GET", PR_PATH, 200, _pull_request())
        fake_github.add("POST", "/graphql", 200, {"data": {"enablePullRequestAutoMerge": {}}})

        await enable_auto_merge(ctx, 7, MergeMethod.REBASE)

        graphql = fake_github.last
        assert str(graphql.url) == "https://api.github.com/graphql"
        assert graphql.headers["Authorization"] == "Bearer ghp_test"
        assert graphql.headers["Content-Type"] == "application/json"
        assert fake_github.json_of(graphql) == {
            "query": 'mutation PullRequestAutoMerge { enablePullRequestAutoMerge('
            'input: {pullRequestId: "PR_kwAB", mergeMethod: REBASE}) { clientMutationId } }'
        }

    async def test_defaults_to_squash(self, fake_github, ctx):
        fake_github.add("GET", PR_PATH, 200, _pull_request())
        fake_github.add("POST", "/graphql", 200, {"data": {}})

        await enable_auto_merge(ctx, 7)

        assert "mergeMethod: SQUASH" in fake_github.json_of(fake_github.last)["query"]

    async def test_returns_pull_request_read_before_mutation(self, fake_github, ctx):
        pr = _pull_request()
        fake_github.add("GET", PR_PATH, 200, pr)
        fake_github.add("POST", "/graphql", 200, {"data": {}})

        result = await enable_auto_merge(ctx, 7)

        assert result == pr
        assert result["auto_merge"] is None
        assert fake_github.paths() == [("GET", PR_PATH), ("POST", "/graphql")]

    async def test_graphql_errors_do_not_raise(self, fake_github, ctx):
        fake_github.add("GET", PR_PATH, 200, _pull_request())
        fake_github.add(
            "POST", "/graphql", 200, {"errors": [{"message": "Auto-merge not allowed"}]}
        )

        result = await enable_auto_merge(ctx, 7)

        assert result["node_id"] == "PR_kwAB"

    async def test_missing_pull_request_sends_no_mutation(self, fake_github, ctx):
        with pytest.raises(NotFoundError, match="Pull request 7 not found"):
            await enable_auto_merge(ctx, 7)

        assert fake_github.paths() == [("GET", PR_PATH)]

    async def test_other_read_failures_propagate(self, fake_github, ctx):
        fake_github.add("GET", PR_PATH, 403, {"message": "Resource not accessible"})

        with pytest.raises(GitHubApiError) as exc_info:
            await enable_auto_merge(ctx, 7)

        assert exc_info.value.status_code == 403
        assert len(fake_github.requests) == 1

    async def test_graphql_http_failure_propagates(self, fake_github, ctx):
        fake_github.add("GET", PR_PATH, 200, _pull_request())
        fake_github.add("POST", "/graphql", 502, {"message": "Bad Gateway"})

        with pytest.raises(GitHubApiError) as exc_info:
            await enable_auto_merge(ctx, 7)

        assert exc_info.value.status_code == 502


class TestPullRequestCrud:
    async def test_list_follows_pagination(self, fake_github, ctx):
        next_url = "https://api.github.com/repositories/1/pulls?state=open&per_page=100&page=2"
        fake_github.add(
            "GET",
            "/repos/acme/api/pulls",
            200,
            [{"number": 1}],
            headers={"Link": f'<{next_url}>; rel="next"'},
        )
        fake_github.add("GET", "/repositories/1/pulls", 200, [{"number": 2}])

        result = await list_pull_requests(ctx)

        assert [pr["number"] for pr in result] == [1, 2]
        first = fake_github.requests[0]
        assert first.url.params["state"] == "open"
        assert first.url.params["per_page"] == "100"

    async def test_create_sends_title_head_base(self, fake_github, ctx):
        fake_github.add("POST", "/repos/acme/api/pulls", 201, {"number": 8})

        await create_pull_request(ctx, "Bump deps", "deps/bump", "main")

        assert fake_github.json_of(fake_github.last) == {
            "title": "Bump deps",
            "head": "deps/bump",
            "base": "main",
        }

    async def test_create_from_issue(self, fake_github, ctx):
        fake_github.add("POST", "/repos/acme/api/pulls", 201, {"number": 12})

        await create_pull_request_from_issue(ctx, 12, "fix/12", "main")

        assert fake_github.json_of(fake_github.last)["issue"] == 12

    async def test_update_closes_when_not_open(self, fake_github, ctx):
        fake_github.add("PATCH", PR_PATH, 200, _pull_request(state="closed"))

        await update_pull_request(ctx, 7, "New title", is_open=False)

        assert fake_github.json_of(fake_github.last) == {"title": "New title", "state": "closed"}

    async def test_merge_squashes_by_default(self, fake_github, ctx):
        fake_github.add("PUT", f"{PR_PATH}/merge", 200, {"merged": True})

        result = await merge_pull_request(ctx, 7, title="Release")

        assert result == {"merged": True}
        assert fake_github.json_of(fake_github.last) == {
            "merge_method": "squash",
            "commit_title": "Release",
        }

    async def test_is_merged_true_on_204(self, fake_github, ctx):
        fake_github.add("GET", f"{PR_PATH}/merge", 204)
        assert await is_pull_request_merged(ctx, 7) is True

    async def test_is_merged_false_on_404(self, fake_github, ctx):
        assert await is_pull_request_merged(ctx, 7) is False

    async def test_lock_uses_issues_endpoint(self, fake_github, ctx):
        fake_github.add("PUT", "/repos/acme/api/issues/7/lock", 204)

        result = await lock_pull_request(ctx, 7, LockReason.TOO_HEATED)

        assert result is None
        assert fake_github.json_of(fake_github.last) == {"lock_reason": "too heated"}


class TestReviews:
    async def test_submit_review_event(self, fake_github, ctx):
        fake_github.add("POST", f"{PR_PATH}/reviews/3/events", 200, {"id": 3})

        await submit_review(ctx, 7, 3, ReviewEvent.APPROVE, body="LGTM")

        assert fake_github.json_of(fake_github.last) == {"event": "APPROVE", "body": "LGTM"}

    async def test_request_reviewers(self, fake_github, ctx):
        fake_github.add("POST", f"{PR_PATH}/requested_reviewers", 201, _pull_request())

        await request_reviewers(ctx, 7, reviewers=["octocat"])

        assert fake_github.json_of(fake_github.last) == {
            "reviewers": ["octocat"],
            "team_reviewers": [],
        }

    async def test_remove_review_requests_sends_body_on_delete(self, fake_github, ctx):
        fake_github.add("DELETE", f"{PR_PATH}/requested_reviewers", 200, _pull_request())

        await remove_review_requests(ctx, 7, team_reviewers=["platform"])

        assert fake_github.json_of(fake_github.last)["team_reviewers"] == ["platform"]

    @pytest.mark.parametrize("reviewers, teams", [(None, None), ([], []), ([], None)])
    async def test_reviewer_request_needs_someone(self, fake_github, ctx, reviewers, teams):
        with pytest.raises(InvalidArgumentError, match="At least one reviewer"):
            await request_reviewers(ctx, 7, reviewers=reviewers, team_reviewers=teams)

        assert fake_github.requests == []
