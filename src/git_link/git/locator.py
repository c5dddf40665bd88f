"""Repository discovery."""

import os
import subprocess
from pathlib import Path

import structlog

from git_link.core.exceptions import BareRepositoryError, NotARepositoryError
from git_link.core.models.repository import RepositoryHandle
from git_link.git.command import run_git

logger = structlog.get_logger(__name__)


class RepositoryLocator:
    """Finds the repository enclosing a directory.

    The search walks upward through ancestor directories, the same way git
    itself does.
    """

    def __init__(self, start: Path | str | None = None) -> None:
        self._start = Path(start) if start is not None else Path.cwd()

    def discover(self) -> RepositoryHandle:
        """Locate the repository and its working directory."""
        try:
            output = run_git(
                "rev-parse", "--is-bare-repository", "--absolute-git-dir", cwd=self._start
            )
        except (subprocess.CalledProcessError, FileNotFoundError) as exc:
            raise NotARepositoryError(
                f"Could not find a git repository in {self._start} or any parent directory",
                details={"start": str(self._start)},
            ) from exc

        is_bare, _, git_dir = output.partition(b"\n")
        if is_bare.strip() == b"true":
            raise BareRepositoryError(
                "Unexpected bare git repo.",
                details={"git_dir": os.fsdecode(git_dir)},
            )

        try:
            toplevel = run_git("rev-parse", "--show-toplevel", cwd=self._start)
        except subprocess.CalledProcessError as exc:
            raise NotARepositoryError(
                f"{self._start} is not inside the repository's working directory",
                details={"git_dir": os.fsdecode(git_dir)},
            ) from exc
        if not toplevel:
            raise BareRepositoryError("Unexpected bare git repo.")

        handle = RepositoryHandle(
            workdir=Path(os.fsdecode(toplevel)),
            git_dir=Path(os.fsdecode(git_dir)),
        )
        logger.debug("Discovered repository", workdir=str(handle.workdir))
        return handle
