"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from git_link.core.models.link import HashCase, HashFormat


class Settings(BaseSettings):
    """Defaults loaded from ``GIT_LINK_*`` environment variables.

    Command-line options take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="GIT_LINK_",
        case_sensitive=False,
    )

    log_level: str = "WARNING"

    # Commit-mode rendering
    hash_case: HashCase = HashCase.UPPER
    hash_length: int | None = Field(default=None, ge=1)

    @property
    def hash_format(self) -> HashFormat:
        return HashFormat(case=self.hash_case, length=self.hash_length)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
