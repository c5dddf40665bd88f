"""Origin remote lookup and Git URL parsing."""

import re
import subprocess
from urllib.parse import urlsplit

import structlog

from git_link.core.exceptions import (
    InvalidRemoteUrlError,
    NoOriginRemoteError,
    UnparsableRemoteUrlError,
)
from git_link.core.models.repository import RemoteDescriptor, RepositoryHandle
from git_link.git.command import run_git

logger = structlog.get_logger(__name__)

ORIGIN = "origin"

_URL_SCHEMES = {"ssh", "git", "http", "https", "git+ssh", "ssh+git", "ftp", "ftps"}
_SCHEME_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)://")
# scp-like syntax: [user@]host:path. No slash may precede the colon.
_SCP_RE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/\\]{2,}):(?P<path>.+)$")


def parse_remote_url(url: str) -> RemoteDescriptor:
    """Parse a Git remote URL into host and repository path.

    Handles:
    - ssh://git@github.com/org/repo.git -> (github.com, org/repo)
    - git@github.com:org/repo.git -> (github.com, org/repo)
    - https://github.com/group/sub/repo -> (github.com, group/sub/repo)
    """
    raw = url.strip()
    scheme_match = _SCHEME_RE.match(raw)
    if scheme_match:
        scheme = scheme_match.group("scheme").lower()
        if scheme not in _URL_SCHEMES:
            raise UnparsableRemoteUrlError(
                f"Unsupported scheme in origin URL: {scheme}", details={"url": url}
            )
        try:
            parts = urlsplit(raw)
            host = parts.hostname
        except ValueError as exc:
            raise UnparsableRemoteUrlError(
                f"Origin URL is not a recognized git URL: {url}", details={"url": url}
            ) from exc
        path = parts.path
    else:
        scp_match = _SCP_RE.match(raw)
        if not scp_match:
            raise UnparsableRemoteUrlError(
                f"Origin URL is not a recognized git URL: {url}", details={"url": url}
            )
        host = scp_match.group("host").lower()
        path = scp_match.group("path")

    if not host:
        raise UnparsableRemoteUrlError("No host found in origin URL", details={"url": url})

    repository_path = _strip_git_suffix(path.strip("/")).strip("/")
    if not repository_path:
        raise UnparsableRemoteUrlError(
            "No repository path found in origin URL", details={"url": url}
        )

    return RemoteDescriptor(host=host, repository_path=repository_path, url=raw)


def _strip_git_suffix(path: str) -> str:
    # Only a trailing ".git"; other dots belong to the name.
    if path.endswith(".git"):
        return path[: -len(".git")]
    return path


class RemoteResolver:
    """Reads the origin remote of a repository."""

    def __init__(self, repository: RepositoryHandle) -> None:
        self._repository = repository

    def get_origin_url(self) -> str:
        """Get the configured URL of the origin remote."""
        try:
            raw = run_git("config", "--get", f"remote.{ORIGIN}.url", cwd=self._repository.workdir)
        except subprocess.CalledProcessError as exc:
            raise NoOriginRemoteError(
                f"Remote '{ORIGIN}' does not exist",
                details={"workdir": str(self._repository.workdir)},
            ) from exc

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRemoteUrlError("Origin URL was not valid UTF-8") from exc

    def resolve(self) -> RemoteDescriptor:
        """Resolve the origin remote to a host and repository path."""
        remote = parse_remote_url(self.get_origin_url())
        logger.debug(
            "Resolved origin remote",
            host=remote.host,
            repository_path=remote.repository_path,
        )
        return remote
