"""Repository contents endpoints.

GET /repos/{owner}/{repo}/contents/{path} and friends. Commit message and
branch fall back to `Settings.default_commit_message` and
`Settings.default_branch` when the caller leaves them blank.
"""

import base64
from pathlib import PurePosixPath
from typing import Optional

from github_endpoints.github.client import GITHUB_HTML, GITHUB_RAW, GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require
from github_endpoints.github.schemas import ArchiveFormat


def _contents(ctx: GitHubContext, path: str) -> str:
    return f"{ctx.repo_path}/contents/{path.lstrip('/')}"


def _commit_defaults(
    ctx: GitHubContext, path: str, message: Optional[str], branch: Optional[str]
) -> dict:
    settings = ctx.settings
    if not message or not message.strip():
        message = settings.default_commit_message.format(name=PurePosixPath(path).name)
    if not branch or not branch.strip():
        branch = settings.default_branch
    return {"message": message, "branch": branch}


def _encode(content: str, convert_to_base64: bool) -> str:
    if not convert_to_base64:
        return content
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


async def get_content(
    ctx: GitHubContext, path: str, reference: Optional[str] = None
) -> bytes:
    """Raw bytes of a file, at ``reference`` when given, else the default branch."""
    require(path, "path")
    params = {"ref": reference} if reference and reference.strip() else None
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_bytes(_contents(ctx, path), accept=GITHUB_RAW, params=params)


async def get_content_as_string(
    ctx: GitHubContext, path: str, reference: Optional[str] = None
) -> str:
    data = await get_content(ctx, path, reference)
    return data.decode("utf-8", errors="replace") if data else ""


async def create_file(
    ctx: GitHubContext,
    path: str,
    content: str,
    message: Optional[str] = None,
    branch: Optional[str] = None,
    convert_to_base64: bool = True,
) -> dict:
    """Create a file. Pass ``convert_to_base64=False`` if ``content`` is already base64."""
    require(path, "path")
    require(content, "content")

    payload = _commit_defaults(ctx, path, message, branch)
    payload["content"] = _encode(content, convert_to_base64)

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.put(_contents(ctx, path), json=payload)


async def update_file(
    ctx: GitHubContext,
    path: str,
    content: str,
    sha: str,
    message: Optional[str] = None,
    branch: Optional[str] = None,
    convert_to_base64: bool = True,
) -> dict:
    """Replace a file. ``sha`` is the blob SHA of the version being replaced."""
    require(path, "path")
    require(content, "content")
    require(sha, "sha")

    payload = _commit_defaults(ctx, path, message, branch)
    payload["content"] = _encode(content, convert_to_base64)
    payload["sha"] = sha

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.put(_contents(ctx, path), json=payload)


async def delete_file(
    ctx: GitHubContext,
    path: str,
    sha: str,
    message: Optional[str] = None,
    branch: Optional[str] = None,
) -> dict:
    require(path, "path")
    require(sha, "sha")

    payload = _commit_defaults(ctx, path, message, branch)
    payload["sha"] = sha

    async with GitHubClient.for_context(ctx) as gh:
        return await gh.delete(_contents(ctx, path), json=payload)


async def get_archive(
    ctx: GitHubContext,
    archive_format: ArchiveFormat = ArchiveFormat.TARBALL,
    reference: Optional[str] = None,
) -> bytes:
    """Download the repository as a tarball or zipball (follows the redirect)."""
    url = f"{ctx.repo_path}/{ArchiveFormat(archive_format).value}"
    if reference:
        url = f"{url}/{reference}"
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_bytes(url, accept="*/*")


async def get_readme(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{ctx.repo_path}/readme")


async def get_readme_html(ctx: GitHubContext) -> str:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get_text(f"{ctx.repo_path}/readme", accept=GITHUB_HTML)
