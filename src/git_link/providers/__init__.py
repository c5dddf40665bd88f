"""Hosting providers that turn resolved requests into URLs."""

from git_link.providers.base import LinkProvider
from git_link.providers.github import GitHubProvider
from git_link.providers.registry import ProviderRegistry, default_registry

__all__ = ["LinkProvider", "GitHubProvider", "ProviderRegistry", "default_registry"]
