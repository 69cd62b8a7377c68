"""Caller context shared by every endpoint function."""

from dataclasses import dataclass, field

from github_endpoints.core.config import Settings, get_settings


@dataclass(frozen=True)
class GitHubContext:
    """Repository coordinates and credentials for one automation run.

    ``token`` is a personal access token or an installation access token;
    it is excluded from the repr so contexts can be logged safely.
    """

    owner: str
    repo_name: str
    token: str = field(repr=False)
    settings: Settings = field(default_factory=get_settings, compare=False)

    @property
    def repo_path(self) -> str:
        """REST path prefix for this repository, e.g. ``/repos/acme/api``."""
        return f"/repos/{self.owner}/{self.repo_name}"
