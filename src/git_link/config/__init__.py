"""Configuration for git-link."""

from git_link.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
