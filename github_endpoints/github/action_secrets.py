"""Repository GitHub Actions secrets.

Secret values must be encrypted with the repository public key (libsodium
sealed box) before they reach `create_or_update_secret`; fetch the key with
`get_public_key`. Plain values are never sent.
"""

from github_endpoints.github.client import GitHubClient
from github_endpoints.github.context import GitHubContext
from github_endpoints.github.errors import require


def _secrets(ctx: GitHubContext) -> str:
    return f"{ctx.repo_path}/actions/secrets"


async def list_secrets(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(_secrets(ctx), params={"per_page": ctx.settings.page_size})


async def get_secret(ctx: GitHubContext, name: str) -> dict:
    """Secret metadata (name, dates). GitHub never returns the value."""
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_secrets(ctx)}/{name}")


async def get_public_key(ctx: GitHubContext) -> dict:
    async with GitHubClient.for_context(ctx) as gh:
        return await gh.get(f"{_secrets(ctx)}/public-key")


async def create_or_update_secret(
    ctx: GitHubContext, name: str, key_id: str, encrypted_value: str
) -> None:
    require(name, "name")
    require(key_id, "key_id")
    require(encrypted_value, "encrypted_value")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.put(
            f"{_secrets(ctx)}/{name}",
            json={"encrypted_value": encrypted_value, "key_id": key_id},
        )


async def delete_secret(ctx: GitHubContext, name: str) -> None:
    require(name, "name")
    async with GitHubClient.for_context(ctx) as gh:
        await gh.delete(f"{_secrets(ctx)}/{name}")
