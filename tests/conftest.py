"""Shared test fixtures for the github-endpoints test suite.

HTTP is served by `FakeGitHub`, an httpx.MockTransport handler with a
route table keyed by (method, path). Every request is recorded so tests
can assert on URLs, headers and bodies. Unknown routes answer 404 the way
GitHub does, so "not found" paths need no setup.
"""

import json
from typing import Any, Optional

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from github_endpoints.core.config import Settings
from github_endpoints.github.context import GitHubContext


# ---------------------------------------------------------------------------
# Fake GitHub API
# ---------------------------------------------------------------------------


class FakeGitHub:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[tuple[int, bytes, dict]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Queue a response. Several responses on one route are served in order;
        the last one repeats."""
        if content is None and json_body is not None:
            content = json.dumps(json_body).encode()
            headers = {"Content-Type": "application/json", **(headers or {})}
        self.routes.setdefault((method, path), []).append(
            (status_code, content or b"", headers or {})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self.routes.get((request.method, request.url.path))
        if not queued:
            return httpx.Response(
                404,
                json={
                    "message": "Not Found",
                    "documentation_url": "https://docs.github.com/rest",
                },
            )
        status_code, content, headers = queued.pop(0) if len(queued) > 1 else queued[0]
        return httpx.Response(status_code, content=content, headers=headers)

    # -- assertion helpers --------------------------------------------------

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def json_of(self, request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None

    def paths(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]


@pytest.fixture
def fake_github(monkeypatch) -> FakeGitHub:
    """Route every httpx.AsyncClient created by the package through FakeGitHub."""
    fake = FakeGitHub()
    transport = httpx.MockTransport(fake.handler)
    real_async_client = httpx.AsyncClient

    def _client(*args, **kwargs):
        kwargs["transport"] = transport
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr("github_endpoints.github.client.httpx.AsyncClient", _client)
    return fake


# ---------------------------------------------------------------------------
# Settings and context
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def ctx(settings) -> GitHubContext:
    return GitHubContext(owner="acme", repo_name="api", token="ghp_test", settings=settings)


# ---------------------------------------------------------------------------
# RSA keys
# ---------------------------------------------------------------------------


def _generate_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


_RSA_KEY = _generate_private_key()


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return _RSA_KEY


@pytest.fixture(scope="session")
def private_key_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def public_key_pem(rsa_key) -> bytes:
    return rsa_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
