"""Domain models for git-link."""

from git_link.core.models.link import HashCase, HashFormat, LinkRequest, ReferenceMode
from git_link.core.models.repository import RemoteDescriptor, RepositoryHandle

__all__ = [
    "RepositoryHandle",
    "RemoteDescriptor",
    "ReferenceMode",
    "HashCase",
    "HashFormat",
    "LinkRequest",
]
