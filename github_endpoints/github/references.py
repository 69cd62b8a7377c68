"""Git reference endpoints.

References are given without the ``refs/`` prefix for reads, updates and
deletes (``heads/main``, ``tags/v1.0``); a leading ``refs/`` is stripped if
present. Creation needs the fully qualified name, which is added when
missing.
"""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require

_REFS_PREFIX = "refs/"


def _short(reference: str) -> str:
    return reference.strip().removeprefix(_REFS_PREFIX)


def _qualified(reference: str) -> str:
    return f"{_REFS_PREFIX}{_short(reference)}"


async def get_reference(ctx: GitHubContext, reference: str) -> dict:
    require(reference, "reference")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/git/ref/{_short(reference)}")


async def create_reference(ctx: GitHubContext, reference: str, sha: str) -> dict:
    require(reference, "reference")
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            f"{ctx.repo_path}/git/refs",
            json={"ref": _qualified(reference), "sha": sha},
        )


async def update_reference(
    ctx: GitHubContext, reference: str, sha: str, force: bool = False
) -> dict:
    require(reference, "reference")
    require(sha, "sha")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch(
            f"{ctx.repo_path}/git/refs/{_short(reference)}",
            json={"sha": sha, "force": force},
        )


async def delete_reference(ctx: GitHubContext, reference: str) -> None:
    require(reference, "reference")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{ctx.repo_path}/git/refs/{_short(reference)}")
