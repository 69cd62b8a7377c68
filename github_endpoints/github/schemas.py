"""Request bodies and enumerations for the GitHub endpoint functions.

Responses are returned as decoded JSON; only the request side is typed.
Every model is serialised with ``model_dump(exclude_none=True)`` so unset
optional fields are left for GitHub to default.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MergeMethod(str, Enum):
    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"


class LockReason(str, Enum):
    OFF_TOPIC = "off-topic"
    TOO_HEATED = "too heated"
    RESOLVED = "resolved"
    SPAM = "spam"


class ReviewEvent(str, Enum):
    APPROVE = "APPROVE"
    REQUEST_CHANGES = "REQUEST_CHANGES"
    COMMENT = "COMMENT"


class BlobEncoding(str, Enum):
    UTF8 = "utf-8"
    BASE64 = "base64"


class ArchiveFormat(str, Enum):
    TARBALL = "tarball"
    ZIPBALL = "zipball"


class TaggedType(str, Enum):
    COMMIT = "commit"
    TREE = "tree"
    BLOB = "blob"


class RequestModel(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class TreeEntry(RequestModel):
    """One entry of a new git tree.

    Give either ``sha`` (an existing object) or ``content`` (a new blob).
    """

    path: str
    mode: str = "100644"
    type: TaggedType = TaggedType.BLOB
    sha: Optional[str] = None
    content: Optional[str] = None


class GitActor(RequestModel):
    name: str
    email: str
    date: Optional[datetime] = None


class NewCommit(RequestModel):
    message: str
    tree: str
    parents: list[str] = Field(default_factory=list)
    author: Optional[GitActor] = None
    committer: Optional[GitActor] = None


class NewRelease(RequestModel):
    tag_name: str
    target_commitish: Optional[str] = None
    name: Optional[str] = None
    body: Optional[str] = None
    draft: Optional[bool] = None
    prerelease: Optional[bool] = None
    generate_release_notes: Optional[bool] = None
    make_latest: Optional[str] = None


class ReleaseUpdate(RequestModel):
    tag_name: Optional[str] = None
    target_commitish: Optional[str] = None
    name: Optional[str] = None
    body: Optional[str] = None
    draft: Optional[bool] = None
    prerelease: Optional[bool] = None
    make_latest: Optional[str] = None


class ReleaseAssetUpload(BaseModel):
    """A file to attach to a release. Not serialised as JSON: ``data`` is
    sent as the raw request body with ``content_type`` as its media type."""

    file_name: str
    content_type: str = "application/octet-stream"
    data: bytes
    label: Optional[str] = None


class NewRepository(RequestModel):
    name: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    private: Optional[bool] = None
    has_issues: Optional[bool] = None
    has_projects: Optional[bool] = None
    has_wiki: Optional[bool] = None
    auto_init: Optional[bool] = None
    gitignore_template: Optional[str] = None
    license_template: Optional[str] = None
    team_id: Optional[int] = None


class RepositoryUpdate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    private: Optional[bool] = None
    visibility: Optional[str] = None
    has_issues: Optional[bool] = None
    has_projects: Optional[bool] = None
    has_wiki: Optional[bool] = None
    default_branch: Optional[str] = None
    allow_squash_merge: Optional[bool] = None
    allow_merge_commit: Optional[bool] = None
    allow_rebase_merge: Optional[bool] = None
    allow_auto_merge: Optional[bool] = None
    delete_branch_on_merge: Optional[bool] = None
    archived: Optional[bool] = None


class NewDeployment(RequestModel):
    ref: str
    task: Optional[str] = None
    auto_merge: Optional[bool] = None
    required_contexts: Optional[list[str]] = None
    payload: Optional[dict[str, Any]] = None
    environment: Optional[str] = None
    description: Optional[str] = None
    transient_environment: Optional[bool] = None
    production_environment: Optional[bool] = None


class NewDeploymentStatus(RequestModel):
    state: str
    log_url: Optional[str] = None
    description: Optional[str] = None
    environment: Optional[str] = None
    environment_url: Optional[str] = None
    auto_inactive: Optional[bool] = None


class UserUpdate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None
    blog: Optional[str] = None
    twitter_username: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    hireable: Optional[bool] = None
    bio: Optional[str] = None
