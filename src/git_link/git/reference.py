"""Resolution of HEAD to a branch name or commit hash."""

import subprocess

import structlog

from git_link.core.exceptions import (
    DetachedHeadError,
    HeadUnresolvableError,
    InvalidBranchNameError,
)
from git_link.core.models.link import HashFormat, ReferenceMode
from git_link.core.models.repository import RepositoryHandle
from git_link.git.command import run_git

logger = structlog.get_logger(__name__)

_BRANCH_PREFIX = b"refs/heads/"


class ReferenceResolver:
    """Computes the reference a link is anchored to."""

    def __init__(
        self,
        repository: RepositoryHandle,
        hash_format: HashFormat | None = None,
    ) -> None:
        self._repository = repository
        self._hash_format = hash_format or HashFormat()

    def _run_git(self, *args: str) -> bytes:
        return run_git(*args, cwd=self._repository.workdir)

    def resolve(self, mode: ReferenceMode) -> str:
        """Resolve HEAD according to ``mode``.

        HEAD must point at a commit in either mode.
        """
        digest = self.head_commit()
        if mode == ReferenceMode.COMMIT:
            return self._hash_format.render(digest)
        return self.current_branch()

    def head_commit(self) -> bytes:
        """Get the raw id of the commit HEAD peels to."""
        try:
            output = self._run_git("rev-parse", "--verify", "--quiet", "HEAD^{commit}")
            return bytes.fromhex(output.decode("ascii").strip())
        except (subprocess.CalledProcessError, UnicodeDecodeError, ValueError) as exc:
            raise HeadUnresolvableError(
                "HEAD does not point to a commit",
                details={"workdir": str(self._repository.workdir)},
            ) from exc

    def current_branch(self) -> str:
        """Get the short name of the local branch HEAD is checked out on.

        This is a linear scan over every local branch; git keeps no index
        from commits to branches.
        """
        output = self._run_git(
            "for-each-ref", "--format=%(HEAD)%00%(refname)", "refs/heads/"
        )
        scanned = 0
        for line in output.splitlines():
            scanned += 1
            marker, _, refname = line.partition(b"\0")
            if marker != b"*":
                continue
            name = refname[len(_BRANCH_PREFIX):] if refname.startswith(_BRANCH_PREFIX) else refname
            try:
                branch = name.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidBranchNameError("Branch name not valid UTF-8") from exc
            logger.debug("Found branch at HEAD", branch=branch, scanned=scanned)
            return branch

        raise DetachedHeadError(
            'No branch points to the current HEAD. Try using "commit"',
            details={"branches_scanned": scanned},
        )
