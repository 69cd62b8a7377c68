"""Git database endpoints: blobs, commits, annotated tags and trees."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require
from github_endpoints.github.schemas import BlobEncoding, NewCommit, TaggedType, TreeEntry


def _git(ctx: GitHubContext) -> str:
    return f"{ctx.repo_path}/git"


async def get_blob(ctx: GitHubContext, sha: str) -> dict:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_git(ctx)}/blobs/{sha}")


async def create_blob(
    ctx: GitHubContext, content: str, encoding: BlobEncoding = BlobEncoding.UTF8
) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            f"{_git(ctx)}/blobs",
            json={"content": content, "encoding": BlobEncoding(encoding).value},
        )


async def get_commit(ctx: GitHubContext, sha: str) -> dict:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_git(ctx)}/commits/{sha}")


async def create_commit(ctx: GitHubContext, commit: NewCommit) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_git(ctx)}/commits", json=commit.to_payload())


async def get_tag(ctx: GitHubContext, sha: str) -> dict:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_git(ctx)}/tags/{sha}")


async def create_tag(
    ctx: GitHubContext,
    tag: str,
    message: str,
    object_sha: str,
    tagger_name: str,
    tagger_email: str,
    tagged_type: TaggedType = TaggedType.COMMIT,
) -> dict:
    """Create an annotated tag object, dated now (UTC).

    This only creates the tag object; point a ``refs/tags/<tag>`` reference
    at it with `references.create_reference` to make it visible.
    """
    require(tag, "tag")
    require(object_sha, "object_sha")

    payload = {
        "tag": tag,
        "message": message,
        "object": object_sha,
        "type": TaggedType(tagged_type).value,
        "tagger": {
            "name": tagger_name,
            "email": tagger_email,
            "date": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        },
    }
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_git(ctx)}/tags", json=payload)


async def get_tree(ctx: GitHubContext, sha: str) -> dict:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_git(ctx)}/trees/{sha}")


async def get_tree_recursive(ctx: GitHubContext, sha: str) -> dict:
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_git(ctx)}/trees/{sha}", params={"recursive": 1})


async def create_tree(
    ctx: GitHubContext,
    base_tree: Optional[str],
    entries: Optional[Sequence[TreeEntry]] = None,
) -> dict:
    """Create a tree from ``entries`` layered on top of ``base_tree``."""
    payload = {"tree": [entry.to_payload() for entry in entries or []]}
    if base_tree:
        payload["base_tree"] = base_tree
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(f"{_git(ctx)}/trees", json=payload)
