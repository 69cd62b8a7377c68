"""Exceptions raised by the GitHub endpoint functions.

Only local precondition checks raise before a request is made. Everything
GitHub itself rejects surfaces as `GitHubApiError` with the upstream status
code and message; nothing is retried.
"""

from typing import Optional


class GitHubEndpointsError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(GitHubEndpointsError, ValueError):
    """A required argument was missing or blank."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        super().__init__(message or f"'{argument}' must not be empty")


class CryptoFailureError(GitHubEndpointsError):
    """The App private key could not be decoded, parsed or used to sign."""


class NotFoundError(GitHubEndpointsError, LookupError):
    """A referenced entity (pull request, release tag) does not exist."""


class GitHubApiError(GitHubEndpointsError):
    """GitHub answered with a non-2xx status, or could not be reached.

    ``status_code`` is None for transport failures; the original httpx
    exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        status_code: Optional[int],
        message: str,
        documentation_url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.documentation_url = documentation_url
        if status_code is None:
            super().__init__(f"GitHub API request failed: {message}")
        else:
            super().__init__(f"GitHub API error ({status_code}): {message}")


def require(value, argument: str) -> None:
    """Raise InvalidArgumentError when a required value is None or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(argument)
