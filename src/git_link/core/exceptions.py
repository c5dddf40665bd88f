"""Exception hierarchy for git-link."""

from typing import Any


class GitLinkError(Exception):
    """Base exception for all git-link errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(GitLinkError):
    """Invalid user input."""


class InvalidRefTypeError(ValidationError):
    """The requested ref type is neither "branch" nor "commit"."""


# Discovery


class RepositoryError(GitLinkError):
    """Failure while locating or reading the repository."""


class NotARepositoryError(RepositoryError):
    """No repository in the directory or any of its ancestors."""


class BareRepositoryError(RepositoryError):
    """The repository has no working directory."""


# Remote


class RemoteError(GitLinkError):
    """Failure while resolving the origin remote."""


class NoOriginRemoteError(RemoteError):
    pass


class InvalidRemoteUrlError(RemoteError):
    pass


class UnparsableRemoteUrlError(RemoteError):
    pass


class UnsupportedHostError(RemoteError):
    pass


# Reference


class RefResolutionError(GitLinkError):
    """Failure while resolving HEAD to a branch or commit."""


class HeadUnresolvableError(RefResolutionError):
    pass


class DetachedHeadError(RefResolutionError):
    pass


class InvalidBranchNameError(RefResolutionError):
    pass


# Path


class PathError(GitLinkError):
    """Failure while normalizing the requested file path."""


class LinkedFileNotFoundError(PathError):
    pass


class PathOutsideRepositoryError(PathError):
    pass


class InvalidFilePathEncodingError(PathError):
    pass
