"""Release and release asset endpoints."""

import logging
from typing import Optional

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import GitHubApiError, NotFoundError, require
from github_endpoints.github.schemas import NewRelease, ReleaseAssetUpload, ReleaseUpdate

logger = logging.getLogger(__name__)


def _releases(ctx: GitHubContext) -> str:
    return f"{ctx.repo_path}/releases"


async def list_releases(ctx: GitHubContext) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(_releases(ctx))


async def get_release(ctx: GitHubContext, tag: str) -> dict:
    require(tag, "tag")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_releases(ctx)}/tags/{tag}")


async def get_latest_release(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_releases(ctx)}/latest")


async def create_release(ctx: GitHubContext, release: NewRelease) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(_releases(ctx), json=release.to_payload())


async def edit_release(ctx: GitHubContext, release_id: int, update: ReleaseUpdate) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch(f"{_releases(ctx)}/{release_id}", json=update.to_payload())


async def delete_release(ctx: GitHubContext, release_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{_releases(ctx)}/{release_id}")


async def get_release_asset(ctx: GitHubContext, asset_id: int) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_releases(ctx)}/assets/{asset_id}")


async def list_release_assets(ctx: GitHubContext, release_id: int) -> list[dict]:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.paginate(f"{_releases(ctx)}/{release_id}/assets")


async def edit_release_asset(
    ctx: GitHubContext,
    asset_id: int,
    name: Optional[str] = None,
    label: Optional[str] = None,
) -> dict:
    payload = {k: v for k, v in {"name": name, "label": label}.items() if v is not None}
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.patch(f"{_releases(ctx)}/assets/{asset_id}", json=payload)


async def delete_release_asset(ctx: GitHubContext, asset_id: int) -> None:
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{_releases(ctx)}/assets/{asset_id}")


async def upload_release_asset(
    ctx: GitHubContext, tag: str, asset: ReleaseAssetUpload
) -> dict:
    """Attach a file to the release tagged ``tag``.

    The upload goes to the release's ``upload_url`` (uploads.github.com on
    github.com). Cancelling the awaiting task aborts the upload.

    Raises:
        NotFoundError: No release exists for ``tag``.
    """
    require(tag, "tag")
    async with GitHubClient.for_context(ctx) as gh:
        try:
            release = await gh.get(f"{_releases(ctx)}/tags/{tag}")
        except GitHubApiError as exc:
            if exc.status_code == 404:
                raise NotFoundError(f"Release with tag '{tag}' not found.") from exc
            raise

        # upload_url is a URI template: ".../assets{?name,label}"
        upload_url = release["upload_url"].split("{", 1)[0]
        logger.info(
            "Uploading %s (%d bytes) to release %s",
            asset.file_name,
            len(asset.data),
            tag,
        )
        return await gh.post(
            upload_url,
            params={"name": asset.file_name, "label": asset.label},
            content=asset.data,
            headers={"Content-Type": asset.content_type},
        )


async def generate_release_notes(
    ctx: GitHubContext,
    tag_name: str,
    target_commitish: Optional[str] = None,
    previous_tag_name: Optional[str] = None,
    configuration_file_path: Optional[str] = None,
) -> dict:
    require(tag_name, "tag_name")
    payload = {
        "tag_name": tag_name,
        "target_commitish": target_commitish,
        "previous_tag_name": previous_tag_name,
        "configuration_file_path": configuration_file_path,
    }
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.post(
            f"{_releases(ctx)}/generate-notes",
            json={k: v for k, v in payload.items() if v is not None},
        )
