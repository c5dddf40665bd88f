"""Repository and remote models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositoryHandle(BaseModel):
    """A discovered, non-bare Git repository."""

    model_config = ConfigDict(frozen=True)

    workdir: Path
    git_dir: Path


class RemoteDescriptor(BaseModel):
    """Host and canonical repository path parsed from a remote URL."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    repository_path: str = Field(min_length=1)
    url: str | None = None  # raw remote URL, kept for diagnostics

    @field_validator("repository_path")
    @classmethod
    def _no_surrounding_slashes(cls, value: str) -> str:
        if value.startswith("/") or value.endswith("/"):
            raise ValueError("repository_path must not start or end with '/'")
        return value
