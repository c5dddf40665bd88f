"""Core domain models and exceptions for git-link."""

from git_link.core.exceptions import (
    BareRepositoryError,
    DetachedHeadError,
    GitLinkError,
    HeadUnresolvableError,
    InvalidBranchNameError,
    InvalidFilePathEncodingError,
    InvalidRefTypeError,
    InvalidRemoteUrlError,
    LinkedFileNotFoundError,
    NoOriginRemoteError,
    NotARepositoryError,
    PathOutsideRepositoryError,
    UnparsableRemoteUrlError,
    UnsupportedHostError,
    ValidationError,
)
from git_link.core.models import (
    HashCase,
    HashFormat,
    LinkRequest,
    ReferenceMode,
    RemoteDescriptor,
    RepositoryHandle,
)

__all__ = [
    # Models
    "RepositoryHandle",
    "RemoteDescriptor",
    "ReferenceMode",
    "HashCase",
    "HashFormat",
    "LinkRequest",
    # Exceptions
    "GitLinkError",
    "ValidationError",
    "InvalidRefTypeError",
    "NotARepositoryError",
    "BareRepositoryError",
    "NoOriginRemoteError",
    "InvalidRemoteUrlError",
    "UnparsableRemoteUrlError",
    "UnsupportedHostError",
    "HeadUnresolvableError",
    "DetachedHeadError",
    "InvalidBranchNameError",
    "LinkedFileNotFoundError",
    "PathOutsideRepositoryError",
    "InvalidFilePathEncodingError",
]
