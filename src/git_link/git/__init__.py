"""Git integration module for git-link."""

from git_link.git.locator import RepositoryLocator
from git_link.git.paths import ensure_exists, relative_to_workdir
from git_link.git.reference import ReferenceResolver
from git_link.git.remote import RemoteResolver, parse_remote_url

__all__ = [
    "RepositoryLocator",
    "RemoteResolver",
    "ReferenceResolver",
    "parse_remote_url",
    "ensure_exists",
    "relative_to_workdir",
]
