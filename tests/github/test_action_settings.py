"""Tests for Actions secrets and configuration variables."""

import pytest

from github_endpoints.github.action_secrets import (
    create_or_update_secret,
    delete_secret,
    get_public_key,
)
from github_endpoints.github.action_variables import (
    create_variable,
    list_organization_variables,
    update_variable,
)
from github_endpoints.github.errors import InvalidArgumentError

ACTIONS = "/repos/acme/api/actions"


class TestSecrets:
    async def test_public_key(self, fake_github, ctx):
        fake_github.add("GET", f"{ACTIONS}/secrets/public-key", 200, {"key_id": "568", "key": "base64key"})

        result = await get_public_key(ctx)

        assert result["key_id"] == "568"

    async def test_put_encrypted_value(self, fake_github, ctx):
        fake_github.add("PUT", f"{ACTIONS}/secrets/NPM_TOKEN", 201)

        await create_or_update_secret(ctx, "NPM_TOKEN", "568", "c2VhbGVk")

        assert fake_github.json_of(fake_github.last) == {
            "encrypted_value": "c2VhbGVk",
            "key_id": "568",
        }

    async def test_encrypted_value_required(self, fake_github, ctx):
        with pytest.raises(InvalidArgumentError, match="encrypted_value"):
            await create_or_update_secret(ctx, "NPM_TOKEN", "568", "")
        assert fake_github.requests == []

    async def test_delete(self, fake_github, ctx):
        fake_github.add("DELETE", f"{ACTIONS}/secrets/NPM_TOKEN", 204)

        await delete_secret(ctx, "NPM_TOKEN")

        assert fake_github.paths() == [("DELETE", f"{ACTIONS}/secrets/NPM_TOKEN")]


class TestVariables:
    async def test_create_posts_to_collection(self, fake_github, ctx):
        fake_github.add("POST", f"{ACTIONS}/variables", 201)

        await create_variable(ctx, "REGION", "eu-west-1")

        assert fake_github.json_of(fake_github.last) == {"name": "REGION", "value": "eu-west-1"}

    async def test_update_patches_variable(self, fake_github, ctx):
        fake_github.add("PATCH", f"{ACTIONS}/variables/REGION", 204)

        await update_variable(ctx, "REGION", "us-east-1")

        assert fake_github.last.method == "PATCH"
        assert fake_github.json_of(fake_github.last)["value"] == "us-east-1"

    async def test_organization_variables(self, fake_github, ctx):
        fake_github.add(
            "GET", f"{ACTIONS}/organization-variables", 200, {"total_count": 1, "variables": []}
        )

        result = await list_organization_variables(ctx)

        assert result["total_count"] == 1
