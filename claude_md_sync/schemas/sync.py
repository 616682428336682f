"""Pydantic schema for a single file synchronization request."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from claude_md_sync.utils.constants import DEFAULT_LOCAL_PATH, DEFAULT_REMOTE_PATH


class SyncRequest(BaseModel):
    """Pydantic model describing which remote file to fetch and where to write it."""

    model_config = ConfigDict(frozen=True)

    repo_owner: str = Field(min_length=1)
    repo_name: str = Field(min_length=1)
    branch: str = Field(min_length=1)
    remote_path: str = Field(default=DEFAULT_REMOTE_PATH, min_length=1)
    local_path: str = Field(default=DEFAULT_LOCAL_PATH, min_length=1)

    @field_validator("repo_owner", "repo_name", "branch")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        """Reject values that only contain whitespace."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @property
    def repository(self) -> str:
        """The repository in 'owner/repo' format."""
        return f"{self.repo_owner}/{self.repo_name}"
