from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _normalise_base_url(url: str) -> str:
    """Strip trailing slashes so paths can be joined with a plain f-string.

    GitHub Enterprise installs are usually configured as
    ``https://ghe.example.com/api/v3/``; the trailing slash would otherwise
    produce ``//repos/...`` request paths.
    """
    return url.rstrip("/")


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    All fields are read from ``GITHUB_ENDPOINTS_*`` variables (or a local
    ``.env``). The model is frozen: a Settings instance is built once and
    handed to every client constructed from a context, never mutated.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_ENDPOINTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # GitHub endpoints; override both for GitHub Enterprise Server.
    api_base_url: str = "https://api.github.com"
    graphql_url: str = "https://api.github.com/graphql"

    @field_validator("api_base_url", mode="before")
    @classmethod
    def normalise_api_base_url(cls, v: str) -> str:
        return _normalise_base_url(v)

    # Sent as User-Agent on every request; GitHub rejects requests without one.
    user_agent: str = "GitHub Endpoints Client"
    api_version: str = "2022-11-28"

    # Pagination and transport
    page_size: int = 100
    request_timeout: float = 30.0

    # Defaults for the contents API when the caller leaves them unset.
    # ``{name}`` is replaced with the file name of the uploaded path.
    default_branch: str = "main"
    default_commit_message: str = "File uploaded: {name}"

    # Logging
    debug: bool = False


def get_settings() -> Settings:
    return Settings()
