"""GitHub App authentication.

Handles JWT generation for GitHub App auth and installation token exchange.
The private key is supplied by the caller on every call, as raw PEM text or
as base64-encoded PEM (the form most CI secret stores hold it in). Nothing
here is cached: each call signs a fresh JWT and discards it.

GitHub App auth flow:
1. Generate a JWT signed with the App's private key
2. Exchange the JWT for a short-lived installation access token
3. Use the installation token for API calls scoped to that installation
"""

import base64
import binascii
import logging
import time
from typing import Optional, Union

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from github_endpoints import __version__
from github_endpoints.core.config import Settings, get_settings
from github_endpoints.github.client import GitHubClient
from github_endpoints.github.errors import CryptoFailureError, require

logger = logging.getLogger(__name__)

# GitHub rejects App JWTs valid for more than 10 minutes.
JWT_LIFETIME_SECONDS = 10 * 60
# Backdate iat to tolerate clock drift between the runner and GitHub.
JWT_CLOCK_SKEW_SECONDS = 60

_PEM_PREFIX = "-----BEGIN"


def load_private_key(private_key: str) -> RSAPrivateKey:
    """Parse an RSA private key given as PEM text or base64-encoded PEM."""
    require(private_key, "private_key")

    text = private_key.strip()
    if text.startswith(_PEM_PREFIX):
        pem = text.encode("utf-8")
    else:
        try:
            # Line-wrapped base64 (as `base64` prints it) is accepted.
            pem = base64.b64decode("".join(text.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CryptoFailureError(
                "Private key is neither PEM nor base64-encoded PEM"
            ) from exc

    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CryptoFailureError(f"Could not parse private key: {exc}") from exc

    if not isinstance(key, RSAPrivateKey):
        raise CryptoFailureError(
            f"GitHub App keys must be RSA, got {type(key).__name__}"
        )
    return key


def create_app_jwt(app_id: Union[str, int], private_key: str) -> str:
    """Create a JWT for authenticating as the GitHub App.

    The token is valid for 10 minutes from now, with ``iat`` backdated
    60 seconds, so ``exp - iat`` is always 660 seconds.
    """
    require(app_id, "app_id")
    key = load_private_key(private_key)

    now = int(time.time())
    payload = {
        "iat": now - JWT_CLOCK_SKEW_SECONDS,
        "exp": now + JWT_LIFETIME_SECONDS,
        "iss": str(app_id),
    }

    try:
        return jwt.encode(payload, key, algorithm="RS256")
    except jwt.PyJWTError as exc:
        raise CryptoFailureError(f"Could not sign App JWT: {exc}") from exc


async def get_installation_token(
    app_id: Union[str, int],
    installation_id: int,
    private_key: str,
    settings: Optional[Settings] = None,
) -> dict:
    """Exchange a GitHub App JWT for an installation access token.

    Returns GitHub's response unmodified (``token``, ``expires_at``,
    ``permissions``, ...). Installation tokens expire after one hour; the
    caller owns the token from here on.
    """
    require(private_key, "private_key")
    require(app_id, "app_id")
    require(installation_id, "installation_id")

    logger.debug("Using github-endpoints v%s", __version__)
    app_jwt = create_app_jwt(app_id, private_key)

    logger.info("Requesting installation token for installation %s", installation_id)
    async with GitHubClient(app_jwt, settings or get_settings()) as gh:
        return await gh.post(f"/app/installations/{installation_id}/access_tokens")


async def get_repository_installation(
    app_id: Union[str, int],
    private_key: str,
    owner: str,
    repo_name: str,
    settings: Optional[Settings] = None,
) -> dict:
    """Look up the App installation that covers a repository.

    The repository must have the App installed; the returned ``id`` is the
    installation id to pass to `get_installation_token`.
    """
    require(owner, "owner")
    require(repo_name, "repo_name")

    app_jwt = create_app_jwt(app_id, private_key)
    async with GitHubClient(app_jwt, settings or get_settings()) as gh:
        return await gh.get(f"/repos/{owner}/{repo_name}/installation")
